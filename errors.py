"""Exception hierarchy for the conversion pipeline."""

from typing import Optional


class MigrationError(Exception):
    """Base exception for conversion failures."""
    pass


class MalformedDocumentError(MigrationError):
    """The export document does not match the expected WXR shape."""
    pass


class DateUnparseableError(MigrationError):
    """A post's publish date is not a valid RFC 2822 timestamp."""

    def __init__(self, value: str, title: Optional[str] = None):
        self.value = value
        self.title = title
        message = f"Cannot parse pubDate {value!r}"
        if title is not None:
            message += f" of post '{title}'"
        super().__init__(message)


class OutputWriteError(MigrationError):
    """Creating a directory or writing a file failed."""

    def __init__(self, path, cause: OSError):
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to write {path}: {cause}")


class UnsafePathError(MigrationError):
    """A resolved output path escapes the output root."""

    def __init__(self, path, root):
        self.path = path
        self.root = root
        super().__init__(f"Resolved path {path} is outside output root {root}")


class RenderError(MigrationError):
    """HTML to Markdown rendering failed for a single item."""
    pass


__all__ = [
    'MigrationError',
    'MalformedDocumentError',
    'DateUnparseableError',
    'OutputWriteError',
    'UnsafePathError',
    'RenderError',
]
