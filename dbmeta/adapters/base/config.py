"""
Configuration types and structures for dialect adapters.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any


class LogicalType(str, Enum):
    """Database-agnostic column types handed to the adapters by the host."""

    NONE = "none"
    NUMBER = "number"
    STRING = "string"
    DATE = "date"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    BIGNUMBER = "bignumber"
    SERIALIZABLE = "serializable"
    BINARY = "binary"
    TIMESTAMP = "timestamp"
    INTERNET_ADDRESS = "internet_address"


class AccessType(str, Enum):
    """Ways a host can reach a database."""

    NATIVE = "native"
    ODBC = "odbc"  # JDBC-ODBC bridge
    OCI = "oci"
    PLUGIN = "plugin"
    JNDI = "jndi"  # directory lookup

    @classmethod
    def parse(cls, value: "AccessType | str | None") -> "AccessType":
        """Resolve an access type from its name, defaulting to NATIVE."""
        if value is None or value == "":
            return cls.NATIVE
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(
                f"Unknown access type: {value}. Supported: {[a.value for a in cls]}"
            ) from None


@dataclass(frozen=True)
class ColumnSpec:
    """Immutable description of one column as seen by the type mapper."""

    name: str
    logical_type: LogicalType
    length: int = -1  # <= 0 means unknown
    precision: int = -1  # <= 0 means none
    quoted: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.logical_type, LogicalType):
            try:
                coerced = LogicalType(str(self.logical_type).lower())
            except ValueError:
                coerced = LogicalType.NONE
            object.__setattr__(self, "logical_type", coerced)

    @property
    def is_wrapped_in_quotes(self) -> bool:
        return len(self.name) >= 2 and self.name.startswith('"') and self.name.endswith('"')

    @property
    def rendered_name(self) -> str:
        """Name as it should appear in SQL text."""
        if self.quoted and not self.is_wrapped_in_quotes:
            return f'"{self.name}"'
        return self.name

    def renamed(self, name: str) -> "ColumnSpec":
        """Return a copy of this column under another name."""
        return replace(self, name=name)


@dataclass
class ColumnChangeRequest:
    """Arguments for a single add/drop/modify column generation call."""

    table_name: str
    column: ColumnSpec
    technical_key: str | None = None
    primary_key: str | None = None
    use_autoinc: bool = False
    semicolon: bool = False


def normalize_attributes(attributes: dict[str, Any] | None) -> dict[str, str]:
    """Convert attribute values to the Y/N strings kept in the attribute store."""
    normalized = {}
    for key, value in (attributes or {}).items():
        if isinstance(value, bool):
            value = "Y" if value else "N"
        normalized[str(key)] = str(value)
    return normalized


@dataclass
class AdapterConfig:
    """Configuration for dialect adapters."""

    # Dialect identifier used by the registry
    type: str

    # Connection settings
    access_type: AccessType = AccessType.NATIVE
    host: str | None = None
    port: int | str | None = None
    database: str | None = None

    # Adapter-local key/value attribute store (e.g. STRICT_NUMBER_38_INTERPRETATION)
    attributes: dict[str, str] = field(default_factory=dict)

    # Additional custom settings
    extra: dict[str, Any] | None = None
