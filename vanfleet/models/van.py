# vanfleet/models/van.py
"""
Fleet vans table (TABLA_VANS).
VIN and MATRICULA are the natural keys and are unique across the fleet.
Deleting a van deletes its breakdown history (VANS_AVERIAS) with it.
"""

from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, Date, Boolean, Text
from sqlalchemy.orm import relationship
from vanfleet.database import Base


class Van(Base):
    __tablename__ = "TABLA_VANS"

    id = Column("ID", Integer, primary_key=True, autoincrement=True)
    active = Column("ACTIVA", Boolean, default=True, nullable=False)
    vin = Column("VIN", String(17), unique=True, nullable=False)
    model = Column("MODELO", String(100), nullable=False)
    matricula = Column("MATRICULA", String(20), unique=True, nullable=False, index=True)
    policy_number = Column("NUM_POLIZA", String(50))
    van_type = Column("TIPO", String(50), nullable=False)
    company = Column("EMPRESA", String(100), nullable=False)
    key_number = Column("NUM_LLAVE", Integer)
    state = Column("ESTADO", String(50), nullable=False)
    itv_valid = Column("ESTADO_ITV", Boolean, default=True, nullable=False)
    itv_date = Column("FECHA_ITV", Date)
    has_breakdown = Column("AVERIA", Boolean, default=False, nullable=False)
    activation_date = Column("FECHA_ACTIVACION", Date)
    defleet_date = Column("FECHA_DEFLEETING", Date)
    contract_end_date = Column("FECHA_FIN_CONTRATO", Date)
    observations = Column("OBSERVACIONES", Text)
    created_at = Column("createdAt", DateTime, default=datetime.utcnow, nullable=False, index=True)
    updated_at = Column("updatedAt", DateTime, default=datetime.utcnow, nullable=False)

    breakdowns = relationship(
        "Breakdown",
        back_populates="van",
        cascade="all, delete-orphan",
    )

    def __repr__(self):
        return f"<Van {self.id} plate={self.matricula} company={self.company} active={self.active}>"
