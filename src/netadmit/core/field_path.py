from __future__ import annotations

import re
from dataclasses import dataclass

_SEGMENT = re.compile(r"([^.\[\]]+)((?:\[\d+\])*)")
_INDEX = re.compile(r"\[(\d+)\]")


@dataclass(frozen=True, slots=True)
class FieldPath:
    """Immutable pointer into a nested object, rendered as ``a.b[0].c``.

    Every derivation returns a new path, so one prefix can be shared by any
    number of checks.
    """

    parts: tuple[str | int, ...] = ()

    @classmethod
    def root(cls, name: str, *more: str) -> FieldPath:
        return cls((name, *more))

    @classmethod
    def parse(cls, text: str) -> FieldPath:
        parts: list[str | int] = []
        if not text:
            return cls()
        for segment in text.split("."):
            m = _SEGMENT.fullmatch(segment)
            if not m:
                raise ValueError(f"Invalid field path: {text!r}")
            parts.append(m.group(1))
            parts.extend(int(i) for i in _INDEX.findall(m.group(2)))
        return cls(tuple(parts))

    def child(self, name: str, *more: str) -> FieldPath:
        return FieldPath((*self.parts, name, *more))

    def index(self, idx: int) -> FieldPath:
        return FieldPath((*self.parts, idx))

    def __str__(self) -> str:
        out = ""
        for part in self.parts:
            if isinstance(part, int):
                out += f"[{part}]"
            elif out:
                out += f".{part}"
            else:
                out = part
        return out
