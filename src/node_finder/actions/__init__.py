"""Actions on resolved nodes."""

from .elements import (
    fill_in,
    clear,
    click,
    choose,
    check,
    uncheck,
    text,
    attr,
    selected,
    has_value,
    has_content,
    is_checked,
)

__all__ = [
    "fill_in",
    "clear",
    "click",
    "choose",
    "check",
    "uncheck",
    "text",
    "attr",
    "selected",
    "has_value",
    "has_content",
    "is_checked",
]
