"""
Platform level mapping

Maps LogLevel to and from the native severity scale of a host platform.
"""

from log_facade.platform.level_mapper import LevelMapper
from log_facade.platform.android import (
    AndroidLevel,
    ANDROID_LEVEL_MAPPER,
    to_android_level,
    from_android_level,
    tag_from_name,
)
from log_facade.platform.stdlib import (
    STDLIB_LEVEL_MAPPER,
    to_stdlib_level,
    from_stdlib_level,
)

__all__ = [
    "LevelMapper",
    "AndroidLevel",
    "ANDROID_LEVEL_MAPPER",
    "to_android_level",
    "from_android_level",
    "tag_from_name",
    "STDLIB_LEVEL_MAPPER",
    "to_stdlib_level",
    "from_stdlib_level",
]
