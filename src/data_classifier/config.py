"""YAML/dict config loader for data-classifier.

Describes a boundary policy: which classifications must not leave the
system, which must always be retained, and the classification hints for
known field names.  Supports loading from a YAML file or a plain dict (for
embedding in a larger collector config).

Example YAML:

    data_classifier:
      enabled: true
      drop:
        - user-generated-content
        - pii
      keep:
        - persist
      fields:
        message.body: [ugc]
        user.name: [pii]
        timestamp: [high-cardinality]
"""

from __future__ import annotations
import logging
from pathlib import Path
from typing import Any, Callable

from .classification import Classification
from .types import Attribute

logger = logging.getLogger(__name__)


def _keep_all(attr: Attribute) -> bool:
    """Pass-through predicate when the policy is disabled."""
    return True


def load_config(data: dict[str, Any] | None) -> dict[str, Any]:
    """Normalize a config dict (from YAML or inline).

    Label lists are resolved to Classification values; an unknown label
    raises ValueError.
    """
    data = data or {}
    # Support nested under "data_classifier" key or flat
    if "data_classifier" in data:
        data = data["data_classifier"] or {}

    cfg = {
        "enabled": data.get("enabled", True),
        "drop": Classification.from_labels(data.get("drop") or []),
        "keep": Classification.from_labels(data.get("keep", ["persist"]) or []),
        "fields": {
            name: Classification.from_labels(labels or [])
            for name, labels in (data.get("fields") or {}).items()
        },
    }
    logger.debug(
        "loaded policy enabled=%s drop=%s keep=%s fields=%d",
        cfg["enabled"], cfg["drop"], cfg["keep"], len(cfg["fields"]),
    )
    return cfg


def load_from_yaml(path: str | Path) -> dict[str, Any]:
    """Load config from a YAML file."""
    import yaml  # optional dependency
    with open(path) as f:
        return load_config(yaml.safe_load(f))


def _normalized(config: dict[str, Any]) -> dict[str, Any]:
    # Already through load_config when the label lists are resolved
    if isinstance(config.get("drop"), Classification):
        return config
    return load_config(config)


def classify(config: dict[str, Any], name: str) -> Classification:
    """Classification hint configured for a field name (NO_VALUE if none)."""
    return _normalized(config)["fields"].get(name, Classification.NO_VALUE)


def create_filter(config: dict[str, Any]) -> Callable[[Attribute], bool]:
    """Build a Resource.filter predicate from a config dict.

    An attribute survives when it carries any ``keep`` flag, or when it
    carries no ``drop`` flag.
    """
    cfg = _normalized(config)
    if not cfg["enabled"]:
        return _keep_all

    drop: Classification = cfg["drop"]
    keep: Classification = cfg["keep"]

    def predicate(attr: Attribute) -> bool:
        if attr.classification.overlaps(keep):
            return True
        return not attr.classification.overlaps(drop)

    return predicate
