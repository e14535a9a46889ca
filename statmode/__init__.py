"""stat-mode

Query and modify the file type and permission bits of a POSIX `st_mode`.
"""

from .constants import (
    DEFAULT_DIR_MODE,
    DEFAULT_FILE_MODE,
    PERMISSION_MASK,
    S_IFBLK,
    S_IFCHR,
    S_IFDIR,
    S_IFIFO,
    S_IFLNK,
    S_IFMT,
    S_IFREG,
    S_IFSOCK,
    S_IFWHT,
    S_IRGRP,
    S_IROTH,
    S_IRUSR,
    S_ISGID,
    S_ISUID,
    S_ISVTX,
    S_IWGRP,
    S_IWOTH,
    S_IWUSR,
    S_IXGRP,
    S_IXOTH,
    S_IXUSR,
)
from .errors import (
    InvalidModeSourceError,
    ModeError,
    ModeErrorCode,
    ModeOperation,
    NegativeModeError,
    UnknownFileTypeError,
    create_mode_error,
)
from .mode import RWX, Group, Mode, ModeHolder, Others, Owner, StatsMode, create_mode, is_stats_mode

__version__ = "2.0.0"

__all__ = [
    "create_mode",
    "is_stats_mode",
    "Mode",
    "ModeHolder",
    "StatsMode",
    "RWX",
    "Owner",
    "Group",
    "Others",
    "ModeError",
    "ModeErrorCode",
    "ModeOperation",
    "InvalidModeSourceError",
    "NegativeModeError",
    "UnknownFileTypeError",
    "create_mode_error",
    "S_IFMT",
    "S_IFIFO",
    "S_IFCHR",
    "S_IFDIR",
    "S_IFBLK",
    "S_IFREG",
    "S_IFLNK",
    "S_IFSOCK",
    "S_IFWHT",
    "S_ISUID",
    "S_ISGID",
    "S_ISVTX",
    "S_IRUSR",
    "S_IWUSR",
    "S_IXUSR",
    "S_IRGRP",
    "S_IWGRP",
    "S_IXGRP",
    "S_IROTH",
    "S_IWOTH",
    "S_IXOTH",
    "PERMISSION_MASK",
    "DEFAULT_FILE_MODE",
    "DEFAULT_DIR_MODE",
]
