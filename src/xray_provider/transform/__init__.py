"""Pack/unpack transformers between configuration models and wire payloads."""

from xray_provider.transform.report import pack_report, unpack_report
from xray_provider.transform.repository_config import (
    pack_repository_config,
    unpack_repository_config,
)

__all__ = [
    "pack_report",
    "unpack_report",
    "pack_repository_config",
    "unpack_repository_config",
]
