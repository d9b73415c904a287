"""Errors raised while reading unit expressions."""

from __future__ import annotations


class ParsingError(ValueError):
    """Raised when a unit expression cannot be parsed."""

    def __init__(self, message: str, text: str = "", position: int | None = None) -> None:
        pointer = ""
        if text and position is not None and 0 <= position <= len(text):
            pointer = f"\n{text}\n{' ' * position}^"
        super().__init__(f"{message}{pointer}")
        self.message = message
        self.text = text
        self.position = position


__all__ = ["ParsingError"]
