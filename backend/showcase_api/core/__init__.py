# showcase_api/core/__init__.py
from .config import get_settings
from .logging_ import setup_logging
from .errors import (
    AppError,
    InvalidArtifact,
    UnsupportedMedia,
    ArtifactTooLarge,
    UnknownTask,
    ProviderError,
    register_exception_handlers,
)

__all__ = [
    "get_settings",
    "setup_logging",
    "AppError",
    "InvalidArtifact",
    "UnsupportedMedia",
    "ArtifactTooLarge",
    "UnknownTask",
    "ProviderError",
    "register_exception_handlers",
]
