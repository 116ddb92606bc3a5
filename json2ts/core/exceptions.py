"""Custom exceptions for json2ts."""


class Json2TsError(Exception):
    """Base exception for all json2ts errors."""
    pass


class ConfigError(Json2TsError):
    """Configuration-related errors."""
    pass


class ConversionError(Json2TsError):
    """JSON input could not be converted."""

    def __init__(self, message: str, original_error: Exception | None = None):
        self.original_error = original_error
        super().__init__(message)


class InputFileNotFoundError(Json2TsError):
    """Input JSON file does not exist."""

    def __init__(self, message: str, file_path: str):
        self.file_path = file_path
        super().__init__(message)
