from colorlevel.core.cache import DetectionCache
from colorlevel.core.config import LOG_FORMAT, get_schema
from colorlevel.core.env import (
    is_azure_pipelines,
    resolve_ci_color_level,
    resolve_env_force_level,
    resolve_teamcity_level,
    resolve_terminal_type_level,
)
from colorlevel.core.flags import has_flag, resolve_flag_explicit_level, resolve_flag_force_level
from colorlevel.core.resolver import ColorLevelResolver
from colorlevel.core.system import host_os_release, parse_os_release, resolve_windows_level
from colorlevel.core.types import (
    UNSUPPORTED,
    ColorLevel,
    DetectionOptions,
    OsVersion,
    ResolvedColorSupport,
    SignalSources,
    StreamDescriptor,
)

__all__ = [
    "LOG_FORMAT",
    "UNSUPPORTED",
    "ColorLevel",
    "ColorLevelResolver",
    "DetectionCache",
    "DetectionOptions",
    "OsVersion",
    "ResolvedColorSupport",
    "SignalSources",
    "StreamDescriptor",
    "get_schema",
    "has_flag",
    "host_os_release",
    "is_azure_pipelines",
    "parse_os_release",
    "resolve_ci_color_level",
    "resolve_env_force_level",
    "resolve_flag_explicit_level",
    "resolve_flag_force_level",
    "resolve_teamcity_level",
    "resolve_terminal_type_level",
    "resolve_windows_level",
]
