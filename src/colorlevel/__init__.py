import logging

from colorlevel._meta import __version__
from colorlevel.api import clear_caches, resolve, stderr_support, stdout_support
from colorlevel.core import (
    UNSUPPORTED,
    ColorLevel,
    ColorLevelResolver,
    DetectionCache,
    DetectionOptions,
    ResolvedColorSupport,
    SignalSources,
    StreamDescriptor,
)
from colorlevel.errors import ColorLevelError, InvalidColorLevelError

logger = logging.getLogger(__name__)

__all__ = [
    "UNSUPPORTED",
    "ColorLevel",
    "ColorLevelError",
    "ColorLevelResolver",
    "DetectionCache",
    "DetectionOptions",
    "InvalidColorLevelError",
    "ResolvedColorSupport",
    "SignalSources",
    "StreamDescriptor",
    "__version__",
    "clear_caches",
    "logger",
    "resolve",
    "stderr_support",
    "stdout_support",
]
