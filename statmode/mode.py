"""Mode value implementation"""

import functools
import logging
from dataclasses import dataclass
from typing import Any, List, Optional, Protocol, Union, runtime_checkable

from .constants import (
    PERMISSION_MASK,
    S_IFBLK,
    S_IFCHR,
    S_IFDIR,
    S_IFIFO,
    S_IFLNK,
    S_IFMT,
    S_IFREG,
    S_IFSOCK,
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
from .errors import create_mode_error

__all__ = [
    "Mode",
    "ModeHolder",
    "StatsMode",
    "RWX",
    "Owner",
    "Group",
    "Others",
    "create_mode",
    "is_stats_mode",
]

logger = logging.getLogger(__name__)

# Checked in this order when rendering the type character
_FILE_TYPE_CHARS = (
    (S_IFDIR, "d"),
    (S_IFREG, "-"),
    (S_IFBLK, "b"),
    (S_IFCHR, "c"),
    (S_IFLNK, "l"),
    (S_IFIFO, "p"),
    (S_IFSOCK, "s"),
)


@runtime_checkable
class StatsMode(Protocol):
    """Anything with a mutable integer `mode` attribute"""

    mode: int


@dataclass
class ModeHolder:
    """Canonical holder for a mode that was passed in as a bare integer

    Attributes:
        mode: File mode and permissions
    """

    mode: int = 0


def _is_mode_int(value: Any) -> bool:
    """Check if value is usable as a mode integer (bool is rejected)"""
    return isinstance(value, int) and not isinstance(value, bool)


def is_stats_mode(value: Any) -> bool:
    """Check if value exposes an integer `mode` attribute"""
    return value is not None and _is_mode_int(getattr(value, "mode", None))


def _test_bit(stat: StatsMode, bit: int) -> bool:
    return bool(stat.mode & bit)


def _set_bit(stat: StatsMode, bit: int, value: bool) -> None:
    if value:
        stat.mode |= bit
    else:
        stat.mode &= ~bit


class RWX:
    """Read/write/execute view over one permission triad of a shared mode

    Subclasses pick the triad by setting the `r`, `w` and `x` bit constants.
    The view never copies the mode: every read and write goes through the
    holder it was created with.
    """

    r: int
    w: int
    x: int

    def __init__(self, stat: StatsMode):
        self._stat = stat

    @property
    def read(self) -> bool:
        return _test_bit(self._stat, self.r)

    @read.setter
    def read(self, value: bool) -> None:
        _set_bit(self._stat, self.r, value)

    @property
    def write(self) -> bool:
        return _test_bit(self._stat, self.w)

    @write.setter
    def write(self, value: bool) -> None:
        _set_bit(self._stat, self.w, value)

    @property
    def execute(self) -> bool:
        return _test_bit(self._stat, self.x)

    @execute.setter
    def execute(self, value: bool) -> None:
        _set_bit(self._stat, self.x, value)

    def __repr__(self) -> str:
        flags = (
            ("r" if self.read else "-")
            + ("w" if self.write else "-")
            + ("x" if self.execute else "-")
        )
        return f"{type(self).__name__}({flags!r})"


class Owner(RWX):
    r = S_IRUSR
    w = S_IWUSR
    x = S_IXUSR


class Group(RWX):
    r = S_IRGRP
    w = S_IWGRP
    x = S_IXGRP


class Others(RWX):
    r = S_IROTH
    w = S_IWOTH
    x = S_IXOTH


def _coerce_source(source: Any) -> StatsMode:
    """Normalize a mode source into the holder the Mode will share"""
    if source is None:
        return ModeHolder()

    if isinstance(source, Mode):
        return source.stat

    if isinstance(source, bool):
        raise create_mode_error(
            code="EINVAL",
            operation="create_mode",
            message="mode must be an integer, not bool",
        )

    if isinstance(source, int):
        if source < 0:
            raise create_mode_error(
                code="EINVAL",
                operation="create_mode",
                mode=source,
                message="mode must be a non-negative integer",
            )
        return ModeHolder(mode=source)

    if hasattr(source, "mode"):
        if not _is_mode_int(source.mode):
            logger.debug(
                "Coercing non-integer mode %r on %s to 0",
                source.mode,
                type(source).__name__,
            )
            source.mode = 0
        return source

    # os.stat_result is immutable, so it seeds a fresh holder instead
    st_mode = getattr(source, "st_mode", None)
    if _is_mode_int(st_mode):
        return ModeHolder(mode=st_mode)

    raise create_mode_error(
        code="EINVAL",
        operation="create_mode",
        message=f'must pass in an integer or a "stat" object, got {type(source).__name__}',
    )


@functools.total_ordering
class Mode:
    """File mode value

    Wraps a POSIX `st_mode` integer and exposes its file type, permission
    triads and special bits. The integer lives on a holder object which may
    belong to the caller (anything with a `mode` attribute, such as a `Stats`
    record); changes made through the Mode are written straight back to it.

    Attributes:
        owner: Owner read/write/execute bits
        group: Group read/write/execute bits
        others: Others read/write/execute bits
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, source: Union[None, int, StatsMode, "Mode"] = None):
        """Create a Mode from an integer, a holder object, or nothing (mode 0)

        Raises:
            ModeError: If `source` is a negative integer, a bool, or an
                object without a `mode` or `st_mode` attribute
        """
        self._stat = _coerce_source(source)
        self.owner = Owner(self._stat)
        self.group = Group(self._stat)
        self.others = Others(self._stat)

    @property
    def stat(self) -> StatsMode:
        """The holder this Mode reads and writes"""
        return self._stat

    def value_of(self) -> int:
        """Return the raw integer value of the mode"""
        return self._stat.mode

    def __int__(self) -> int:
        return self._stat.mode

    def __index__(self) -> int:
        return self._stat.mode

    def _check_mode_property(self, file_type: int, set: Optional[bool] = False) -> bool:
        """Test the file-type bits against `file_type`, forcing them to it when `set`

        The result always reflects the mode as it was before any change.
        """
        mode = self._stat.mode
        if set:
            logger.debug("Setting file type %s on mode %s", oct(file_type), oct(mode))
            self._stat.mode = (mode & ~S_IFMT) | file_type
        return (mode & S_IFMT) == file_type

    def is_directory(self, set: Optional[bool] = False) -> bool:
        """Check if this is a directory"""
        return self._check_mode_property(S_IFDIR, set)

    def is_file(self, set: Optional[bool] = False) -> bool:
        """Check if this is a regular file"""
        return self._check_mode_property(S_IFREG, set)

    def is_block_device(self, set: Optional[bool] = False) -> bool:
        """Check if this is a block device"""
        return self._check_mode_property(S_IFBLK, set)

    def is_character_device(self, set: Optional[bool] = False) -> bool:
        """Check if this is a character device"""
        return self._check_mode_property(S_IFCHR, set)

    def is_symbolic_link(self, set: Optional[bool] = False) -> bool:
        """Check if this is a symbolic link"""
        return self._check_mode_property(S_IFLNK, set)

    def is_fifo(self, set: Optional[bool] = False) -> bool:
        """Check if this is a named pipe"""
        return self._check_mode_property(S_IFIFO, set)

    def is_socket(self, set: Optional[bool] = False) -> bool:
        """Check if this is a socket"""
        return self._check_mode_property(S_IFSOCK, set)

    @property
    def setuid(self) -> bool:
        return _test_bit(self._stat, S_ISUID)

    @setuid.setter
    def setuid(self, value: bool) -> None:
        _set_bit(self._stat, S_ISUID, value)

    @property
    def setgid(self) -> bool:
        return _test_bit(self._stat, S_ISGID)

    @setgid.setter
    def setgid(self, value: bool) -> None:
        _set_bit(self._stat, S_ISGID, value)

    @property
    def sticky(self) -> bool:
        return _test_bit(self._stat, S_ISVTX)

    @sticky.setter
    def sticky(self, value: bool) -> None:
        _set_bit(self._stat, S_ISVTX, value)

    def to_octal(self) -> str:
        """Return the special and permission bits as 4 octal digits, eg. "0754"

        See https://en.wikipedia.org/wiki/File-system_permissions#Numeric_notation
        """
        return format(self._stat.mode & PERMISSION_MASK, "04o")

    def to_string(self) -> str:
        """Return the mode as `ls -l` would print it, eg. "drwxr-xr-x"

        Raises:
            ModeError: If the file-type bits are not a known file type
        """
        chars: List[str] = []

        for file_type, char in _FILE_TYPE_CHARS:
            if self._check_mode_property(file_type):
                chars.append(char)
                break
        else:
            raise create_mode_error(
                code="EFTYPE",
                operation="to_string",
                mode=self.value_of(),
                message='unexpected "file type"',
            )

        # owner read, write, execute
        chars.append("r" if self.owner.read else "-")
        chars.append("w" if self.owner.write else "-")
        if self.setuid:
            chars.append("s" if self.owner.execute else "S")
        else:
            chars.append("x" if self.owner.execute else "-")

        # group read, write, execute
        chars.append("r" if self.group.read else "-")
        chars.append("w" if self.group.write else "-")
        if self.setgid:
            chars.append("s" if self.group.execute else "S")
        else:
            chars.append("x" if self.group.execute else "-")

        # others read, write, execute
        chars.append("r" if self.others.read else "-")
        chars.append("w" if self.others.write else "-")
        if self.sticky:
            chars.append("t" if self.others.execute else "T")
        else:
            chars.append("x" if self.others.execute else "-")

        return "".join(chars)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Mode({oct(self._stat.mode)})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Mode):
            return self.value_of() == other.value_of()
        if _is_mode_int(other):
            return self.value_of() == other
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, Mode):
            return self.value_of() < other.value_of()
        if _is_mode_int(other):
            return self.value_of() < other
        return NotImplemented


def create_mode(source: Union[None, int, StatsMode, Mode] = None) -> Mode:
    """Create a Mode

    Args:
        source: A non-negative integer mode, an object with an integer `mode`
            attribute (shared, not copied), an `os.stat_result`, another Mode
            (shares its holder), or None for mode 0

    Returns:
        Mode bound to the holder for `source`

    Example:
        >>> m = create_mode(0o100644)
        >>> m.to_string()
        '-rw-r--r--'
        >>> m.owner.execute = True
        >>> m.to_octal()
        '0744'
    """
    return Mode(source)
