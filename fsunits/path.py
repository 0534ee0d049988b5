"""
POSIX basename and dirname for paths typed on the command line.

Unlike os.path, these follow the basename(3)/dirname(3) rules used by the filesystem tools:
trailing slashes are ignored ("a/b/" has basename "b"), an all-slash path is "/", and an empty
path is ".". Results longer than PATH_MAX are refused, matching the fixed buffers callers expect.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import os
from typing import AnyStr

# Local ----------------------------------------------------------------------------------------------------------------
from .formatters import fmt_type, fmt_value

PATH_MAX = 4096


# Exceptions -----------------------------------------------------------------------------------------------------------

class PathTooLongError(ValueError):
    """A basename or dirname result does not fit the maximum path length."""

    def __init__(self, path, length: int, max_length: int):
        self.path = path
        self.length = length
        self.max_length = max_length
        super().__init__(
            f"path component of {length} characters does not fit max length {max_length}: "
            f"{fmt_value(path, max_repr=60)}"
        )


# Methods --------------------------------------------------------------------------------------------------------------

def basename(path: AnyStr | os.PathLike[AnyStr] | None, *, max_length: int | None = PATH_MAX) -> AnyStr:
    """
    Return the final component of a path.

    Args:
        path: str, bytes or path-like; None is treated as an empty path.
        max_length: Buffer size the result must fit, terminator included. None disables the check.

    Returns:
        Final component, same type as the path ("." for an empty path, "/" for an all-slash path).

    Raises:
        TypeError: If path is not str, bytes, path-like or None.
        PathTooLongError: If the component does not fit max_length.

    Examples:
        >>> basename("/a/b/")
        'b'
        >>> basename("///")
        '/'
        >>> basename(b"")
        b'.'
    """
    path = _fspath(path)
    sep, dot = _sep_and_dot(path)
    if not path:
        return dot

    end = _strip_trailing_seps(path, sep)
    if end == 1 and path[0:1] == sep:
        return sep

    start = path.rfind(sep, 0, end) + 1
    _check_length(path, end - start, max_length)
    return path[start:end]


def dirname(path: AnyStr | os.PathLike[AnyStr] | None, *, max_length: int | None = PATH_MAX) -> AnyStr:
    """
    Return the directory part of a path.

    Runs of slashes before the last component are collapsed and the result is never empty:
    "a//b" gives "a", "//a" gives "/", a path without a slash gives ".".

    Args:
        path: str, bytes or path-like; None is treated as an empty path.
        max_length: Buffer size the result must fit, terminator included. None disables the check.

    Raises:
        TypeError: If path is not str, bytes, path-like or None.
        PathTooLongError: If the directory does not fit max_length.

    Examples:
        >>> dirname("/a/b")
        '/a'
        >>> dirname("/a/b/")
        '/a'
        >>> dirname("a")
        '.'
        >>> dirname("/a")
        '/'
    """
    path = _fspath(path)
    sep, dot = _sep_and_dot(path)
    if not path:
        return dot

    end = _strip_trailing_seps(path, sep)
    last_sep = path.rfind(sep, 1, end)
    if last_sep < 1:
        # Either the dir is "/" or there are no slashes
        return sep if path[0:1] == sep else dot

    end = _strip_trailing_seps(path[:last_sep], sep)
    _check_length(path, end, max_length)
    return path[:end]


def dirname_inplace(buffer: bytearray | None) -> None:
    """
    Replace a mutable path buffer with its dirname.

    The buffer is truncated in place; a None buffer is left alone and an empty one becomes ".".

    Examples:
        >>> buf = bytearray(b"/a/b/")
        >>> dirname_inplace(buf)
        >>> buf
        bytearray(b'/a')
    """
    if buffer is None:
        return
    if not isinstance(buffer, bytearray):
        raise TypeError(f"buffer must be a bytearray, but found {fmt_type(buffer)}")

    # The dirname is never longer than the path itself
    buffer[:] = dirname(bytes(buffer), max_length=None)


# Private Methods ------------------------------------------------------------------------------------------------------

def _fspath(path):
    if path is None:
        return ""
    try:
        return os.fspath(path)
    except TypeError:
        raise TypeError(f"path must be str, bytes or os.PathLike, but found {fmt_type(path)}") from None


def _sep_and_dot(path: AnyStr) -> tuple[AnyStr, AnyStr]:
    return (b"/", b".") if isinstance(path, bytes) else ("/", ".")


def _strip_trailing_seps(path: AnyStr, sep: AnyStr) -> int:
    """End index after dropping trailing separators, keeping at least the first character."""
    end = len(path)
    while end > 1 and path[end - 1:end] == sep:
        end -= 1
    return end


def _check_length(path, length: int, max_length: int | None) -> None:
    if max_length is not None and length + 1 > max_length:
        raise PathTooLongError(path, length, max_length)
