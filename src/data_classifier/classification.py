"""Classification — bit-set labels for telemetry fields and records.

Usage:
    from data_classifier import Classification, combine

    hint = combine(Classification.PII, Classification.UGC)
    hint.contains(Classification.PII)        # True
    str(hint)  # "user-generated-content,personal-identifiable-information"
    hint.remove(hint)                        # Classification.NO_VALUE

Values are plain ints underneath: immutable, hashable, and safe to share
between threads without locking.
"""

from __future__ import annotations
import enum
import functools
import operator
from types import MappingProxyType
from typing import Iterable, Mapping

# Values are 64-bit words; negative ints are read as two's complement
_WORD = (1 << 64) - 1


def _word(value: int) -> int:
    value = int(value)
    return value & _WORD if value < 0 else value


class Classification(enum.IntFlag, boundary=enum.KEEP):
    """Set of data handling labels packed into a single integer."""

    NO_VALUE = 0
    PERSIST = 1 << 0
    USER_GENERATED_CONTENT = 1 << 1
    PERSONAL_IDENTIFIABLE_INFORMATION = 1 << 2
    SENSITIVE = 1 << 3
    HIGH_CARDINALITY = 1 << 4
    SERVICE_LEVEL_OBJECTIVE = 1 << 5

    # Accepted industry shorthands
    UGC = USER_GENERATED_CONTENT
    PII = PERSONAL_IDENTIFIABLE_INFORMATION
    PD = PERSONAL_IDENTIFIABLE_INFORMATION

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, int) and value < 0:
            value &= _WORD
        return super()._missing_(value)

    @classmethod
    def combine(cls, *values: int) -> Classification:
        return combine(*values)

    @classmethod
    def from_labels(cls, labels: str | Iterable[str]) -> Classification:
        """Resolve label names (or one comma-separated string) into a value.

        Canonical labels, member names and aliases are all accepted, in any
        case, with ``_`` and ``-`` interchangeable.
        """
        if isinstance(labels, str):
            labels = labels.split(",")
        value = cls.NO_VALUE
        for raw in labels:
            key = raw.strip().lower().replace("_", "-")
            if not key:
                continue
            if key not in _BY_LABEL:
                raise ValueError(f"unknown classification label: {raw!r}")
            value |= _BY_LABEL[key]
        return value

    def contains(self, target: int) -> bool:
        """True if every bit of target is set here.

        The empty set only contains itself: ``NO_VALUE.contains(NO_VALUE)``
        is True, ``X.contains(NO_VALUE)`` is False for any non-empty X.
        """
        target = _word(target)
        return int(self) == target or (target != 0 and int(self) & target == target)

    def overlaps(self, other: int) -> bool:
        """True if at least one bit is shared."""
        return int(self) & _word(other) != 0

    def remove(self, value: int) -> Classification:
        """Toggle the bits of value (exclusive-or).

        Bits of value that are not currently set get set, so only pass
        flags known to be present when a clear is intended.
        """
        return Classification(int(self) ^ _word(value))

    def labels(self) -> list[str]:
        if int(self) == 0:
            return [_LABELS[Classification.NO_VALUE]]
        return [label for flag, label in _LABELS.items() if flag and self.contains(flag)]

    def __invert__(self) -> Classification:
        return Classification(~int(self) & _WORD)

    def __contains__(self, target: object) -> bool:
        if not isinstance(target, int):
            return False
        return self.contains(target)

    def __str__(self) -> str:
        return ",".join(self.labels())

    def __format__(self, format_spec: str) -> str:
        if not format_spec:
            return str(self)
        return int.__format__(int(self), format_spec)


# Flag → canonical label, in ascending bit order
_LABELS: Mapping[Classification, str] = MappingProxyType({
    Classification.NO_VALUE:                          "no-value",
    Classification.PERSIST:                           "persist",
    Classification.USER_GENERATED_CONTENT:            "user-generated-content",
    Classification.PERSONAL_IDENTIFIABLE_INFORMATION: "personal-identifiable-information",
    Classification.SENSITIVE:                         "sensitive",
    Classification.HIGH_CARDINALITY:                  "high-cardinality",
    Classification.SERVICE_LEVEL_OBJECTIVE:           "service-level-objective",
})

# Every accepted spelling → flag (labels, member names, aliases)
_BY_LABEL: Mapping[str, Classification] = MappingProxyType({
    **{name.lower().replace("_", "-"): member
       for name, member in Classification.__members__.items()},
    **{label: flag for flag, label in _LABELS.items()},
})


def combine(*values: int) -> Classification:
    """Union of all values; ``combine()`` is NO_VALUE."""
    return Classification(functools.reduce(operator.or_, map(_word, values), 0))
