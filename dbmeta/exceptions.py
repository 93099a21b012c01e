"""
Custom exceptions for the dialect adapters.
"""


class DialectError(Exception):
    """Base exception for all dialect-related errors."""

    pass


class InvalidInputError(DialectError):
    """Raised when a generator receives an unusable argument."""

    pass


class MissingDatabaseNameError(InvalidInputError):
    """Raised when a native connection URL is requested without a database name."""

    pass


class UnsupportedAccessModeError(DialectError):
    """Raised when a dialect does not handle the requested access mode."""

    def __init__(self, dialect: str, access_type) -> None:
        self.dialect = dialect
        self.access_type = access_type
        super().__init__(f"Unsupported access mode [{access_type}] for dialect {dialect}")


class IntrospectionError(DialectError):
    """Raised when probing the data dictionary fails."""

    def __init__(self, table_name: str, cause: Exception | None = None) -> None:
        self.table_name = table_name
        message = f"Unable to determine if indexes exists on table [{table_name}]"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)
