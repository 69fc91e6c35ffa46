from sqlalchemy import Column, String, Integer, BigInteger, Boolean, Text, JSON
from .base import Base, TimestampMixin


class PatientRow(Base, TimestampMixin):
    __tablename__ = "patients"

    id = Column(BigInteger, primary_key=True, autoincrement=False)
    name = Column(String(200), nullable=False)
    blood_group = Column(String(10), nullable=False)
    hospital = Column(String(200), nullable=False)  # Free-text hospital name, not a foreign key
    description = Column(Text, nullable=False)
    needed_pints = Column(Integer, nullable=False)
    donations = Column(Integer, nullable=False, default=0)
    is_complete = Column(Boolean, nullable=False, default=False, index=True)
    password = Column(String(255), nullable=False)  # bcrypt hash
    donors_ids = Column(JSON, nullable=False, default=list)
