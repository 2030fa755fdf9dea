# vanfleet/models/breakdown.py
"""
Breakdowns table (VANS_AVERIAS): maintenance / issue history of a van.
A breakdown is "in workshop" while FECHA_SALIDA_TALLER is empty; that derived
status is what the dashboard counts, not the van's own AVERIA flag.
"""

from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, Date, Text, ForeignKey
from sqlalchemy.orm import relationship
from vanfleet.database import Base


class Breakdown(Base):
    __tablename__ = "VANS_AVERIAS"

    id = Column("ID_AVERIA", Integer, primary_key=True, autoincrement=True)
    van_id = Column("ID", Integer, ForeignKey("TABLA_VANS.ID", ondelete="CASCADE"), nullable=False, index=True)
    cause = Column("CAUSA_AVERIA", Text, nullable=False)
    breakdown_date = Column("FECHA_AVERIA", Date, nullable=False)
    workshop = Column("TALLER", String(100))
    workshop_entry_date = Column("FECHA_ENTRADA_TALLER", Date)
    estimated_exit_date = Column("ESTIMACION_SALIDA", Date)
    workshop_exit_date = Column("FECHA_SALIDA_TALLER", Date)
    observations = Column("OBSERVACIONES_AVERIA", Text)
    created_at = Column("createdAt", DateTime, default=datetime.utcnow, nullable=False, index=True)
    updated_at = Column("updatedAt", DateTime, default=datetime.utcnow, nullable=False)

    van = relationship("Van", back_populates="breakdowns")

    @property
    def in_workshop(self) -> bool:
        return self.workshop_exit_date is None

    def __repr__(self):
        return f"<Breakdown {self.id} van={self.van_id} in_workshop={self.in_workshop}>"
