"""Data classifier — compact classification labels for telemetry data."""

from .classification import Classification, combine
from .types import Attribute, Resource
from .config import classify, create_filter, load_config, load_from_yaml

__all__ = [
    "Classification", "combine",
    "Attribute", "Resource",
    "classify", "create_filter", "load_config", "load_from_yaml",
]
__version__ = "0.1.0"
