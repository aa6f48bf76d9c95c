from __future__ import annotations


class ReaderError(ValueError):
    """Fatal failure while reading one markup part."""


class MalformedMarkupError(ReaderError):
    def __init__(self, message: str, line: int | None = None) -> None:
        super().__init__(message)
        self.line = line


class MissingPartError(ReaderError, FileNotFoundError):
    def __init__(self, part: str) -> None:
        super().__init__(f"missing required part: {part}")
        self.part = part
