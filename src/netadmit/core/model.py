from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class CauseType(str, Enum):
    REQUIRED = "FieldValueRequired"
    INVALID = "FieldValueInvalid"
    DUPLICATE = "FieldValueDuplicate"
    NOT_SUPPORTED = "FieldValueNotSupported"


@dataclass(frozen=True, slots=True)
class ValidationCause:
    type: CauseType
    message: str
    field: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type.value,
            "message": self.message,
            "field": self.field,
        }
