"""Configuration validation for xray-provider."""

from xray_provider.validation.exclusive import (
    Conflict,
    find_conflicts,
    is_supplied,
    validate_exclusive_groups,
)
from xray_provider.validation.parser import parse_config

__all__ = [
    "Conflict",
    "find_conflicts",
    "is_supplied",
    "validate_exclusive_groups",
    "parse_config",
]
