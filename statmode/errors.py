"""Error types for mode operations"""

from typing import Literal, Optional

# errno-style codes for mode errors
ModeErrorCode = Literal[
    "EINVAL",  # Invalid argument (unsupported mode source)
    "EFTYPE",  # Inappropriate file type (unknown file-type bits)
]

# Operation names for error reporting
ModeOperation = Literal[
    "create_mode",
    "to_string",
]


class ModeError(Exception):
    """Exception with errno-style attributes"""

    def __init__(
        self,
        message: str,
        code: Optional[ModeErrorCode] = None,
        operation: Optional[ModeOperation] = None,
        mode: Optional[int] = None,
    ):
        super().__init__(message)
        self.code = code
        self.operation = operation
        self.mode = mode


class InvalidModeSourceError(ModeError, TypeError):
    pass


class NegativeModeError(ModeError, ValueError):
    pass


class UnknownFileTypeError(ModeError, TypeError):
    pass


def create_mode_error(
    code: ModeErrorCode,
    operation: ModeOperation,
    mode: Optional[int] = None,
    message: Optional[str] = None,
) -> ModeError:
    """Create a mode error with consistent formatting

    Args:
        code: errno-style code (e.g., 'EFTYPE')
        operation: Operation name (e.g., 'to_string')
        mode: Optional numeric mode involved in the error
        message: Optional custom message (defaults to code)

    Returns:
        ModeError subclass that also inherits from the matching builtin
        exception (TypeError for EFTYPE and wrong source types, ValueError
        for negative modes)
    """
    base = message if message else code
    suffix = f" mode={mode}" if mode is not None else ""
    error_message = f"{code}: {base}, {operation}{suffix}"

    if code == "EFTYPE":
        return UnknownFileTypeError(error_message, code=code, operation=operation, mode=mode)

    if code == "EINVAL" and mode is not None and mode < 0:
        return NegativeModeError(error_message, code=code, operation=operation, mode=mode)

    if code == "EINVAL":
        return InvalidModeSourceError(error_message, code=code, operation=operation, mode=mode)

    return ModeError(error_message, code=code, operation=operation, mode=mode)
