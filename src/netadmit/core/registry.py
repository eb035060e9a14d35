from __future__ import annotations

from typing import Callable, Iterator

from netadmit.spec.schema import WorkloadSpec

from .errors import RegistryError
from .field_path import FieldPath
from .model import ValidationCause

CheckFn = Callable[[FieldPath, WorkloadSpec], list[ValidationCause]]


class CheckRegistry:
    def __init__(self) -> None:
        self._checks: dict[str, CheckFn] = {}

    def register(self, name: str, fn: CheckFn) -> None:
        if name in self._checks:
            raise RegistryError(f"Check already registered: {name}")
        self._checks[name] = fn

    def get(self, name: str) -> CheckFn | None:
        return self._checks.get(name)

    def names(self) -> list[str]:
        return list(self._checks)

    def __iter__(self) -> Iterator[tuple[str, CheckFn]]:
        return iter(list(self._checks.items()))

    def __len__(self) -> int:
        return len(self._checks)
