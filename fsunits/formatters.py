"""
Compact type and value formatters for exception messages.

All formatters handle broken __repr__ and very long representations gracefully,
so a bad argument never turns into a second error while the first one is reported.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Any

PRIMITIVE_TYPES = (
    type(None),
    bool,  # Comes before int (is subclass of int)
    int,
    float,
    str,
    bytes,
)

ELLIPSIS = "..."


# Methods --------------------------------------------------------------------------------------------------------------


def fmt_type(obj: Any) -> str:
    """Format the type of an object (or the type itself) for exception messages.

    Examples:
        >>> fmt_type(42)
        '<int>'

        >>> fmt_type(bytearray)
        '<bytearray>'
    """
    cls = obj if isinstance(obj, type) else type(obj)
    type_name = getattr(cls, "__name__", None) or "<unknown>"
    return _fmt_type_value(type_name)


def fmt_value(obj: Any, *, max_repr: int = 80) -> str:
    """
    Format a single value for exception messages.

    Primitives are shown as their repr only, other objects as a type-value pair.
    Long representations are truncated to max_repr characters plus an ellipsis.

    Examples:
        >>> fmt_value(42)
        '42'

        >>> fmt_value("1.5k")
        "'1.5k'"

        >>> fmt_value([1, 2])
        '<list: [1, 2]>'
    """
    # ">" is escaped so a nested repr cannot close the <type: value> brackets
    repr_ = _safe_repr(obj).replace(">", "\\>")
    repr_ = _fmt_truncate(repr_, max_repr)

    if type(obj) in PRIMITIVE_TYPES:
        return repr_
    return _fmt_type_value(type(obj).__name__, repr_)


# Private Methods ------------------------------------------------------------------------------------------------------


def _fmt_truncate(repr_: str, max_len: int) -> str:
    """Keep at most max_len characters, quoted reprs keep their closing quote."""
    if max_len <= 0:
        return ""
    if len(repr_) <= max_len:
        return repr_

    if len(repr_) >= 2 and repr_[0] in ("'", '"') and repr_[-1] == repr_[0]:
        quote = repr_[0]
        return f"{quote}{repr_[1:1 + max_len]}{ELLIPSIS}{quote}"

    return repr_[:max_len] + ELLIPSIS


def _fmt_type_value(type_name: str, value_repr: str | None = None) -> str:
    return f"<{type_name}>" if value_repr is None else f"<{type_name}: {value_repr}>"


def _safe_repr(obj) -> str:
    try:
        return repr(obj)
    except Exception as e:
        return f"<{type(obj).__name__} object (repr failed: {type(e).__name__})>"
