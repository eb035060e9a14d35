from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .model import CauseType, ValidationCause


@dataclass(slots=True)
class ValidationReport:
    causes: list[ValidationCause] = field(default_factory=list)

    def add(self, cause: ValidationCause) -> None:
        self.causes.append(cause)

    def extend(self, causes: list[ValidationCause]) -> None:
        self.causes.extend(causes)

    def counts_by_type(self) -> dict[str, int]:
        counts = {cause_type.value: 0 for cause_type in CauseType}
        for c in self.causes:
            counts[c.type.value] += 1
        return counts

    def counts_by_field_root(self) -> dict[str, int]:
        out: dict[str, int] = {}
        for c in self.causes:
            root = "interfaces" if "domain.devices.interfaces[" in c.field else "networks"
            out[root] = out.get(root, 0) + 1
        return out

    @property
    def exit_code(self) -> int:
        return 1 if self.causes else 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "summary": {
                "counts_by_type": self.counts_by_type(),
                "counts_by_field_root": self.counts_by_field_root(),
                "exit_code": self.exit_code,
            },
            "causes": [c.to_dict() for c in self.causes],
        }
