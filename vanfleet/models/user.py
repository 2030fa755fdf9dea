# vanfleet/models/user.py
"""
Users table. Not used by the shared-password session; kept so a
per-account login can be added without a schema migration.
"""

from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, Boolean, Text
from vanfleet.database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(320), unique=True, nullable=False)
    password_hash = Column("passwordHash", String(255), nullable=False)
    name = Column(Text)
    role = Column(String(20), default="user", nullable=False)   # user | admin
    is_active = Column("isActive", Boolean, default=True, nullable=False)
    created_at = Column("createdAt", DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column("updatedAt", DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)
    last_signed_in = Column("lastSignedIn", DateTime, default=datetime.utcnow, nullable=False)

    def __repr__(self):
        return f"<User {self.id} email={self.email} role={self.role}>"
