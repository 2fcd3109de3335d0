"""Exceptions for simple-migrations."""


class SimpleMigrationsError(Exception):
    """Base exception for simple-migrations errors."""

    pass


class ConfigParseError(SimpleMigrationsError):
    """Raised when the configuration file cannot be read or validated."""

    def __init__(self, message: str = "Failed parsing configuration.") -> None:
        super().__init__(message)


class NoConnectionDetails(SimpleMigrationsError):
    """Raised when the configuration has no ``connection`` section."""

    def __init__(
        self,
        message: str = "No connection details found in simple-migrations-config.json.",
    ) -> None:
        super().__init__(message)
