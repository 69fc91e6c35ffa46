from sqlalchemy import Column, String, BigInteger
from .base import Base, TimestampMixin


class IdCounter(Base, TimestampMixin):
    """Single persisted counter behind the shared record id space."""
    __tablename__ = "id_counters"

    name = Column(String(50), primary_key=True)
    value = Column(BigInteger, nullable=False, default=0)
