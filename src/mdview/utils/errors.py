"""Typed exceptions for rendering, export, I/O formats and persistence."""


class MdviewError(Exception):
    """Base class for package errors."""


class ExportError(MdviewError):
    """Raised when a document cannot be exported."""


class EmptyContentError(ExportError):
    """Raised when there is no content to export."""


class IOFormatError(ValueError):
    """Base class for I/O format related errors."""


class UnsupportedFormatError(IOFormatError):
    """Raised when no reader or writer is registered for a file format."""


class StorageError(MdviewError):
    """Raised when the persisted state cannot be read or written."""
