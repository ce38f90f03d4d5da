from __future__ import annotations

from typing import Callable, TypeVar

T = TypeVar("T", int, float)


class TextInputError(ValueError):
    """Dialog input that cannot become a text attribute."""

    def __init__(self, raw: str, what: str, hint: str):
        self.raw = raw
        self.what = what
        self.hint = hint
        super().__init__(f"{raw} is not a legal {what}.\nPlease enter a {hint}.")


def _parse_positive(raw: str, convert: Callable[[str], T], what: str, hint: str) -> T:
    try:
        value = convert(raw.strip())
    except ValueError as exc:
        raise TextInputError(raw, what, hint) from exc
    if not value > 0:
        raise TextInputError(raw, what, hint)
    return value


def is_blank(raw: str | None) -> bool:
    """Cancelled or empty dialog answers are ignored, not errors."""
    return raw is None or not raw.strip()


def parse_font_size(raw: str) -> int:
    return _parse_positive(raw, int, "text size", "positive integer")


def parse_line_height(raw: str) -> float:
    return _parse_positive(raw, float, "line height", "positive real number")
