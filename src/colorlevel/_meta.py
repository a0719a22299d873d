from __future__ import annotations

import logging
from importlib.metadata import version

__version__ = version("colorlevel")

logger = logging.getLogger("colorlevel")

__all__ = ["__version__", "logger"]
