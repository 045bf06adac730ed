"""foswitch - switch a development machine between metadata workspaces.

By default, foswitch's internal logging is disabled when used as a library.
Library users can enable logging by calling foswitch.enable_logging().
"""

from foswitch.common import disable_library_logging, enable_library_logging

disable_library_logging()

enable_logging = enable_library_logging

__all__ = [
    "enable_logging",
]
