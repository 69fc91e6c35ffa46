from sqlalchemy import Column, String, Integer, BigInteger, JSON
from .base import Base, TimestampMixin


class HospitalRow(Base, TimestampMixin):
    __tablename__ = "hospitals"

    id = Column(BigInteger, primary_key=True, autoincrement=False)
    name = Column(String(200), nullable=False, index=True)
    address = Column(String(500), nullable=False)
    city = Column(String(100), nullable=False, index=True)
    password = Column(String(255), nullable=False)  # bcrypt hash
    donations = Column(Integer, nullable=False, default=0)  # Running total kept out-of-band
    donors_ids = Column(JSON, nullable=False, default=list)
