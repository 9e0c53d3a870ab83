"""Custom exceptions for the conversion system."""


class DbException(Exception):
    """Base exception for database-related errors."""
    pass


class ConversionError(DbException):
    """Raised when a directory cannot be converted (bad input path, etc.)."""
    pass
