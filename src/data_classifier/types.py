"""Record types that carry classifications.

A Resource keeps a running classification of everything appended to it, so
a single ``resource.contains(...)`` answers whether any field needs looking
at before walking the attributes.  Not thread-safe: guard concurrent appends
to the same Resource yourself.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Iterator

from .classification import Classification, combine

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Attribute:
    """A single named telemetry field."""
    name: str              # e.g. "message.body", "user.name"
    value: Any
    classification: Classification = Classification.NO_VALUE

    def __post_init__(self) -> None:
        # Accept plain ints from callers
        object.__setattr__(self, "classification", Classification(self.classification))


@dataclass(slots=True)
class Resource:
    """A record made of many attributes."""
    attributes: list[Attribute] = field(default_factory=list)
    classification: Classification = Classification.NO_VALUE

    def __post_init__(self) -> None:
        self.classification = combine(
            self.classification,
            *(attr.classification for attr in self.attributes),
        )

    def append(self, attr: Attribute) -> None:
        self.classification = combine(self.classification, attr.classification)
        self.attributes.append(attr)

    def extend(self, attrs: Iterable[Attribute]) -> None:
        for attr in attrs:
            self.append(attr)

    def filter(self, predicate: Callable[[Attribute], bool]) -> Resource:
        """Return a new Resource with the attributes predicate keeps.

        The running classification is rebuilt from the kept attributes only.
        """
        kept = Resource()
        for attr in self.attributes:
            if predicate(attr):
                kept.append(attr)
        dropped = len(self.attributes) - len(kept.attributes)
        if dropped:
            logger.debug("filter dropped %d of %d attributes", dropped, len(self.attributes))
        return kept

    def without(self, mask: int) -> Resource:
        """Drop every attribute sharing any flag with mask."""
        return self.filter(lambda attr: not attr.classification.overlaps(mask))

    def contains(self, target: int) -> bool:
        return self.classification.contains(target)

    def __len__(self) -> int:
        return len(self.attributes)

    def __iter__(self) -> Iterator[Attribute]:
        return iter(self.attributes)
