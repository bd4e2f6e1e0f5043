class ComplexityCLIError(Exception):
    """Base exception for all Complexity CLI errors."""

    pass


class ConfigurationError(ComplexityCLIError):
    """Raised when configuration is invalid or a language is unknown."""

    pass


class ValidationError(ComplexityCLIError):
    """Raised when input validation fails."""

    pass


class DocumentError(ComplexityCLIError):
    """Raised when a source document cannot be read."""

    pass


class StoreError(ComplexityCLIError):
    """Raised when the result store cannot be loaded or saved."""

    pass
