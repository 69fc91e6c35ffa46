"""Masks credentials on every record leaving the system."""
from typing import Iterable, List, TypeVar

from ..schemas import Record

PASSWORD_MASK = "******"

R = TypeVar("R", bound=Record)


def redact(record: R) -> R:
    """Return a copy of ``record`` with its password replaced by the mask."""
    return record.model_copy(update={"password": PASSWORD_MASK})


def redact_all(records: Iterable[R]) -> List[R]:
    return [redact(record) for record in records]
