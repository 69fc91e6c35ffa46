from sqlalchemy import Column, String, BigInteger, JSON
from .base import Base, TimestampMixin


class DonorRow(Base, TimestampMixin):
    __tablename__ = "donors"

    id = Column(BigInteger, primary_key=True, autoincrement=False)
    name = Column(String(200), nullable=False)
    blood_group = Column(String(10), nullable=False)
    password = Column(String(255), nullable=False)  # bcrypt hash
    # Patient and hospital ids share one id space, so both kinds appear here
    beneficiaries = Column(JSON, nullable=False, default=list)
