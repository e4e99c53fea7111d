"""
Shared configuration, schemas and errors.
"""

from .config import Settings, get_settings
from .errors import (
    DimensionMismatch,
    InvalidConfiguration,
    ProviderFailure,
    SplitterError,
)
from .schemas import SplitterConfig, build_splitter_config

__all__ = [
    "Settings",
    "get_settings",
    "SplitterConfig",
    "build_splitter_config",
    "SplitterError",
    "InvalidConfiguration",
    "DimensionMismatch",
    "ProviderFailure",
]
