"""
Core dialect adapter base class.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import asdict
from typing import Any, Literal

from dbmeta.exceptions import InvalidInputError, MissingDatabaseNameError, UnsupportedAccessModeError
from dbmeta.variables import VariableSpace

from .capabilities import DialectCapabilities
from .config import (
    AccessType,
    AdapterConfig,
    ColumnChangeRequest,
    ColumnSpec,
    LogicalType,
    normalize_attributes,
)
from .metadata import MetadataHandler, QueryExecutor
from .sql import SQLProcessor

ColumnAction = Literal["add", "drop", "modify"]

UNKNOWN_TYPE = "UNKNOWN"


class DialectAdapter(ABC, SQLProcessor, MetadataHandler):
    """
    Abstract base class for dialect adapters.

    An adapter turns abstract column, table and sequence descriptions into SQL
    text for one database product. All generators are pure functions of their
    arguments, the class capabilities and the instance attribute store.
    """

    # Override in subclasses
    name: str = ""
    capabilities: DialectCapabilities
    RESERVED_WORDS: frozenset[str] = frozenset()
    LARGE_TEXT_TYPE = "CLOB"
    VARCHAR_TYPE = "VARCHAR"
    BINARY_TYPE = "BLOB"
    DROP_COLUMN_CLAUSE = "DROP COLUMN"
    USED_LIBRARIES: tuple[str, ...] = ()
    EXTRA_OPTIONS_HELP_TEXT = ""

    REQUIRED_FIELDS = ["type"]

    ODBC_DRIVER_CLASS = "sun.jdbc.odbc.JdbcOdbcDriver"

    # Attribute store keys
    STRICT_BIGNUMBER_INTERPRETATION = "STRICT_NUMBER_38_INTERPRETATION"
    SUPPORTS_BOOLEAN_DATA_TYPE = "SUPPORTS_BOOLEAN_DATA_TYPE"
    SUPPORTS_TIMESTAMP_DATA_TYPE = "SUPPORTS_TIMESTAMP_DATA_TYPE"

    # Temporary column naming used when emulating a column type change
    TEMP_COLUMN_MAX_BASE = 30
    TEMP_COLUMN_SUFFIX = "_KTL"

    def __init__(self, config: AdapterConfig | dict[str, Any] | None = None) -> None:
        self.logger = logging.getLogger(self.__class__.__name__)

        if config is None:
            config = {"type": self.name}

        # The attribute store must belong to this instance only
        config_dict = asdict(config) if isinstance(config, AdapterConfig) else config

        self._validate_config(config_dict)
        self.config = self._create_adapter_config(config_dict)

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def _validate_config(self, config_dict: dict[str, Any]) -> None:
        """Validate configuration against adapter requirements."""
        missing = set(self.REQUIRED_FIELDS) - set(config_dict.keys())
        if missing:
            raise ValueError(f"Missing required fields for {self.__class__.__name__}: {missing}")

        self._validate_field_types(config_dict)
        self._validate_field_values(config_dict)

    def _validate_field_types(self, config_dict: dict[str, Any]) -> None:
        """Validate field types."""
        port = config_dict.get("port")
        if port is not None and not isinstance(port, (int, str)):
            raise ValueError("Port must be an integer or a string")

        attributes = config_dict.get("attributes")
        if attributes is not None and not isinstance(attributes, dict):
            raise ValueError("Attributes must be a mapping")

    def _validate_field_values(self, config_dict: dict[str, Any]) -> None:
        """Validate field values."""
        port = config_dict.get("port")
        if isinstance(port, str) and port.strip():
            if not port.strip().lstrip("-").isdigit():
                raise ValueError(f"Port must be numeric, got {port!r}")
            port = int(port)
        if isinstance(port, int) and port != -1 and not (1 <= port <= 65535):
            raise ValueError("Port must be between 1 and 65535")

        # Raises ValueError for unknown names
        AccessType.parse(config_dict.get("access_type"))

    def _create_adapter_config(self, config_dict: dict[str, Any]) -> AdapterConfig:
        """Create AdapterConfig from validated dictionary."""
        return AdapterConfig(
            type=config_dict["type"],
            access_type=AccessType.parse(config_dict.get("access_type")),
            host=config_dict.get("host"),
            port=config_dict.get("port"),
            database=config_dict.get("database"),
            attributes=normalize_attributes(config_dict.get("attributes")),
            extra=config_dict.get("extra"),
        )

    def get_attribute(self, key: str, default: str | None = None) -> str | None:
        return self.config.attributes.get(key, default)

    def set_attribute(self, key: str, value: str) -> None:
        self.config.attributes[key] = value

    def _get_flag(self, key: str) -> bool:
        return "Y" == (self.get_attribute(key, "N") or "N").strip().upper()

    def _set_flag(self, key: str, value: bool) -> None:
        self.set_attribute(key, "Y" if value else "N")

    @property
    def strict_big_number_interpretation(self) -> bool:
        """True when NUMBER(38) catalog columns are read as big numbers."""
        return self._get_flag(self.STRICT_BIGNUMBER_INTERPRETATION)

    @strict_big_number_interpretation.setter
    def strict_big_number_interpretation(self, value: bool) -> None:
        self._set_flag(self.STRICT_BIGNUMBER_INTERPRETATION, value)

    @property
    def supports_boolean_data_type(self) -> bool:
        return self._get_flag(self.SUPPORTS_BOOLEAN_DATA_TYPE)

    @supports_boolean_data_type.setter
    def supports_boolean_data_type(self, value: bool) -> None:
        self._set_flag(self.SUPPORTS_BOOLEAN_DATA_TYPE, value)

    @property
    def supports_timestamp_data_type(self) -> bool:
        return self._get_flag(self.SUPPORTS_TIMESTAMP_DATA_TYPE)

    @supports_timestamp_data_type.setter
    def supports_timestamp_data_type(self, value: bool) -> None:
        self._set_flag(self.SUPPORTS_TIMESTAMP_DATA_TYPE, value)

    # ------------------------------------------------------------------
    # Dialect specifics
    # ------------------------------------------------------------------

    @abstractmethod
    def get_default_dialect(self) -> str:
        """Get the closest sqlglot dialect, used to tokenize scripts."""
        pass

    @abstractmethod
    def get_native_driver_class(self) -> str:
        """Get the JDBC driver class used for native access."""
        pass

    @abstractmethod
    def _native_url(self, host: str, port: str, database_name: str) -> str:
        """Build a native URL; port is empty when not supplied."""
        pass

    @abstractmethod
    def _numeric_type(
        self,
        column: ColumnSpec,
        technical_key: str | None,
        primary_key: str | None,
        use_autoinc: bool,
    ) -> str:
        """Map NUMBER, BIGNUMBER and INTEGER columns."""
        pass

    @abstractmethod
    def drop_table_if_exists_statement(self, table_name: str) -> str:
        """Get a statement dropping a table without failing when it is missing."""
        pass

    @abstractmethod
    def list_procedures_sql(self) -> str:
        """Get the SQL listing stored procedures."""
        pass

    # ------------------------------------------------------------------
    # Type mapping
    # ------------------------------------------------------------------

    def field_definition(
        self,
        column: ColumnSpec,
        technical_key: str | None = None,
        primary_key: str | None = None,
        use_autoinc: bool = False,
        add_fieldname: bool = True,
        add_cr: bool = False,
    ) -> str:
        """
        Render a column as it appears in CREATE/ALTER TABLE statements.

        Args:
            column: Column to render
            technical_key: Name of the table's technical key column
            primary_key: Name of the table's primary key column
            use_autoinc: Whether the key column should use auto increment
            add_fieldname: Prefix the definition with the column name
            add_cr: Terminate the definition with a line break

        Returns:
            The field definition; unmapped types render as UNKNOWN
        """
        retval = ""
        if add_fieldname:
            retval += column.rendered_name + " "

        retval += self._column_type(column, technical_key, primary_key, use_autoinc)

        if add_cr:
            retval += "\n"
        return retval

    def map_type(
        self,
        column: ColumnSpec,
        technical_key: str | None = None,
        primary_key: str | None = None,
    ) -> str:
        """Get the dialect type of a column without its name."""
        return self.field_definition(
            column, technical_key, primary_key, add_fieldname=False, add_cr=False
        )

    def _column_type(
        self,
        column: ColumnSpec,
        technical_key: str | None,
        primary_key: str | None,
        use_autoinc: bool,
    ) -> str:
        logical_type = column.logical_type
        if logical_type == LogicalType.TIMESTAMP:
            return self._timestamp_type()
        if logical_type == LogicalType.DATE:
            return self._date_type()
        if logical_type == LogicalType.BOOLEAN:
            return self._boolean_type()
        if logical_type in (LogicalType.NUMBER, LogicalType.BIGNUMBER, LogicalType.INTEGER):
            return self._numeric_type(column, technical_key, primary_key, use_autoinc)
        if logical_type == LogicalType.STRING:
            return self._string_type(column)
        if logical_type == LogicalType.BINARY:
            return self.BINARY_TYPE

        self.logger.warning(
            f"No {self.name} type for column {column.name} of type {logical_type.value}"
        )
        return UNKNOWN_TYPE

    def _timestamp_type(self) -> str:
        return "TIMESTAMP" if self.supports_timestamp_data_type else "DATE"

    def _date_type(self) -> str:
        return "DATE"

    def _boolean_type(self) -> str:
        return "BOOLEAN" if self.supports_boolean_data_type else "CHAR(1)"

    def _string_type(self, column: ColumnSpec) -> str:
        length = column.length
        if length <= 0 or length >= self.capabilities.long_text_threshold:
            return self.LARGE_TEXT_TYPE
        if length == 1:
            return "CHAR(1)"
        if length <= self.capabilities.max_varchar_length:
            return f"{self.VARCHAR_TYPE}({length})"
        return self.LARGE_TEXT_TYPE

    @staticmethod
    def is_key_column(
        column: ColumnSpec, technical_key: str | None, primary_key: str | None
    ) -> bool:
        """True when the column is the technical or primary key (case-insensitive)."""
        name = column.name.lower()
        return any(key is not None and key.lower() == name for key in (technical_key, primary_key))

    def column_from_catalog(self, name: str, precision: int, scale: int) -> ColumnSpec:
        """
        Build a column from the precision/scale the data dictionary reports.

        NUMBER(38) is what the catalog returns for plain INTEGER columns, so it
        is only read as a big number under strict interpretation.
        """
        if precision <= 0 and scale <= 0:
            logical_type = LogicalType.NUMBER
        elif scale > 0:
            big = precision > 15 or scale > 15
            logical_type = LogicalType.BIGNUMBER if big else LogicalType.NUMBER
        elif precision == 38:
            strict = self.strict_big_number_interpretation
            logical_type = LogicalType.BIGNUMBER if strict else LogicalType.INTEGER
        elif precision <= 18:
            logical_type = LogicalType.INTEGER
        else:
            logical_type = LogicalType.BIGNUMBER

        return ColumnSpec(
            name=name,
            logical_type=logical_type,
            length=precision if precision > 0 else -1,
            precision=scale if precision > 0 else -1,
        )

    # ------------------------------------------------------------------
    # DDL generation
    # ------------------------------------------------------------------

    @staticmethod
    def _require_name(value: str | None, what: str) -> str:
        if value is None or not value.strip():
            raise InvalidInputError(f"{what} name must not be empty")
        return value

    @staticmethod
    def _terminate(sql: str, semicolon: bool) -> str:
        return sql + ";" if semicolon else sql

    def add_column_statement(
        self,
        table_name: str,
        column: ColumnSpec,
        technical_key: str | None = None,
        primary_key: str | None = None,
        use_autoinc: bool = False,
        semicolon: bool = False,
    ) -> str:
        """Get the statement adding a column to a table."""
        self._require_name(table_name, "Table")
        definition = self.field_definition(column, technical_key, primary_key, use_autoinc)
        return self._terminate(f"ALTER TABLE {table_name} ADD {definition}", semicolon)

    def drop_column_statement(
        self,
        table_name: str,
        column: ColumnSpec,
        technical_key: str | None = None,
        primary_key: str | None = None,
        use_autoinc: bool = False,
        semicolon: bool = False,
    ) -> str:
        """Get the statement dropping a column from a table."""
        self._require_name(table_name, "Table")
        sql = f"ALTER TABLE {table_name} {self.DROP_COLUMN_CLAUSE} {column.rendered_name}"
        return self._terminate(sql, semicolon)

    def temporary_column_name(self, name: str) -> str:
        """
        Derive the scratch column name used while changing a column's type.

        Surrounding double quotes are stripped, the bare name is cut to 30
        characters and suffixed, and the quotes are put back.
        """
        is_quoted = len(name) >= 2 and name.startswith('"') and name.endswith('"')
        bare = name[1:-1] if is_quoted else name
        bare = bare[: self.TEMP_COLUMN_MAX_BASE] + self.TEMP_COLUMN_SUFFIX
        return f'"{bare}"' if is_quoted else bare

    def modify_column_statement(
        self,
        table_name: str,
        column: ColumnSpec,
        technical_key: str | None = None,
        primary_key: str | None = None,
        use_autoinc: bool = False,
        semicolon: bool = False,
    ) -> str:
        """
        Get a script changing the type of an existing column.

        Neither dialect can alter a column type in place, and RENAME is not
        available on every version, so the data is moved through a temporary
        column. The script is not atomic; wrapping it in a transaction is up to
        the caller.
        """
        self._require_name(table_name, "Table")
        temp_column = column.renamed(self.temporary_column_name(column.name))
        key_args = (technical_key, primary_key, use_autoinc)

        statements = [
            self.add_column_statement(table_name, temp_column, *key_args),
            f"UPDATE {table_name} SET {temp_column.rendered_name}={column.rendered_name}",
            self.drop_column_statement(table_name, column, *key_args),
            self.add_column_statement(table_name, column, *key_args),
            f"UPDATE {table_name} SET {column.rendered_name}={temp_column.rendered_name}",
            self.drop_column_statement(table_name, temp_column, *key_args),
        ]
        self.logger.debug(
            f"Emulating type change of {table_name}.{column.name} via {temp_column.name}"
        )

        sql = ";\n".join(statements)
        if semicolon:
            sql += ";\n"
        return sql

    def render_column_change(self, request: ColumnChangeRequest, action: ColumnAction) -> str:
        """Render an add, drop or modify request."""
        generators = {
            "add": self.add_column_statement,
            "drop": self.drop_column_statement,
            "modify": self.modify_column_statement,
        }
        if action not in generators:
            raise InvalidInputError(
                f"Unknown column action: {action}. Supported: {sorted(generators)}"
            )
        return generators[action](
            request.table_name,
            request.column,
            technical_key=request.technical_key,
            primary_key=request.primary_key,
            use_autoinc=request.use_autoinc,
            semicolon=request.semicolon,
        )

    def sequence_exists_query(self, sequence_name: str) -> str:
        """
        Get the query returning a row when the sequence exists.

        Unqualified names are looked up among the current user's sequences;
        "schema.sequence" is split on the first dot and looked up by owner.
        """
        self._require_name(sequence_name, "Sequence")
        schema_name, separator, name = sequence_name.partition(".")
        if not separator:
            return (
                f"SELECT * FROM USER_SEQUENCES WHERE SEQUENCE_NAME = '{sequence_name.upper()}'"
            )
        return (
            f"SELECT * FROM ALL_SEQUENCES WHERE SEQUENCE_NAME = '{name.upper()}' "
            f"AND SEQUENCE_OWNER = '{schema_name.upper()}'"
        )

    def current_sequence_value_query(self, sequence_name: str) -> str:
        self._require_name(sequence_name, "Sequence")
        return f"SELECT {sequence_name}.currval FROM DUAL"

    def next_sequence_value_query(self, sequence_name: str) -> str:
        self._require_name(sequence_name, "Sequence")
        return f"SELECT {sequence_name}.nextval FROM dual"

    def create_sequence_statement(
        self,
        sequence_name: str,
        start_at: int = 1,
        increment_by: int = 1,
        max_value: int | None = None,
    ) -> str:
        """Get the statement creating a sequence."""
        self._require_name(sequence_name, "Sequence")
        sql = f"CREATE SEQUENCE {sequence_name} START WITH {start_at} INCREMENT BY {increment_by}"
        if max_value is not None:
            sql += f" MAXVALUE {max_value}"
        elif self.capabilities.supports_sequence_no_max_value_option:
            sql += " NOMAXVALUE"
        return sql

    def list_sequences_query(self) -> str:
        return "SELECT SEQUENCE_NAME FROM all_sequences"

    def lock_tables_statement(self, table_names: Sequence[str]) -> str:
        """Get one exclusive LOCK TABLE statement per table."""
        sql = ""
        for table_name in table_names:
            self._require_name(table_name, "Table")
            sql += f"LOCK TABLE {table_name} IN EXCLUSIVE MODE;\n"
        return sql

    def unlock_tables_statement(self, table_names: Sequence[str]) -> str | None:
        """Locks are released on commit, so there is nothing to run."""
        return None

    def limit_clause(self, nr_rows: int) -> str:
        return f" WHERE ROWNUM <= {nr_rows}"

    def query_fields_sql(self, table_name: str) -> str:
        """Get the cheapest query exposing a table's result set layout."""
        self._require_name(table_name, "Table")
        return f"SELECT * FROM {table_name} WHERE 1=0"

    def table_exists_sql(self, table_name: str) -> str:
        return self.query_fields_sql(table_name)

    def column_exists_sql(self, column_name: str, table_name: str) -> str:
        self._require_name(table_name, "Table")
        self._require_name(column_name, "Column")
        return f"SELECT {column_name} FROM {table_name} WHERE 1=0"

    def tablespace_ddl(
        self, tablespace: str | None, variables: VariableSpace, quoter: QueryExecutor
    ) -> str:
        """Get the TABLESPACE clause of a CREATE statement; empty when unsupported."""
        return ""

    # ------------------------------------------------------------------
    # Connection URL
    # ------------------------------------------------------------------

    def _parse_access_type(self, access_type: AccessType | str | None) -> AccessType:
        try:
            return AccessType.parse(access_type)
        except ValueError:
            raise UnsupportedAccessModeError(self.name, access_type) from None

    def default_port(self, access_type: AccessType | str | None = None) -> int:
        if access_type is None:
            access_type = self.config.access_type
        if self._parse_access_type(access_type) == AccessType.NATIVE:
            return self.capabilities.native_port
        return -1

    def driver_class(self, access_type: AccessType | str | None = None) -> str:
        """Get the JDBC driver class for an access type (defaults to the configured one)."""
        if access_type is None:
            access_type = self.config.access_type
        if self._parse_access_type(access_type) == AccessType.ODBC:
            return self.ODBC_DRIVER_CLASS
        return self.get_native_driver_class()

    def build_url(
        self,
        access_type: AccessType | str | None,
        host: str | None,
        port: int | str | None,
        database_name: str | None,
    ) -> str:
        """
        Build a JDBC connection URL.

        Args:
            access_type: ODBC bridge or native access
            host: Server host; empty means localhost
            port: Server port; empty or -1 means the dialect default
            database_name: Database to connect to, required for native access

        Returns:
            The connection URL

        Raises:
            MissingDatabaseNameError: If native access is requested without a database name
            UnsupportedAccessModeError: If the dialect cannot build a URL for the access type
        """
        access = self._parse_access_type(access_type)

        if access == AccessType.ODBC:
            return f"jdbc:odbc:{database_name}"

        if access == AccessType.NATIVE:
            if not host:
                host = "localhost"
            port_text = "" if port is None else str(port).strip()
            if port_text == "-1":
                port_text = ""
            if not database_name:
                raise MissingDatabaseNameError(
                    f"A database name is required to connect to {self.name}"
                )
            if not database_name.startswith("/"):
                database_name = "/" + database_name
            return self._native_url(host, port_text, database_name)

        raise UnsupportedAccessModeError(self.name, access.value)

    def connection_url(self) -> str:
        """Build the URL described by this adapter's configuration."""
        return self.build_url(
            self.config.access_type, self.config.host, self.config.port, self.config.database
        )

    # ------------------------------------------------------------------
    # Reserved words and introspection
    # ------------------------------------------------------------------

    @property
    def reserved_words(self) -> frozenset[str]:
        return self.RESERVED_WORDS

    def is_reserved_word(self, word: str) -> bool:
        return word.strip().upper() in self.RESERVED_WORDS

    def get_database_info(self) -> dict[str, Any]:
        """Get a summary of the dialect and this adapter's configuration."""
        capabilities = asdict(self.capabilities)
        capabilities["access_types"] = [a.value for a in self.capabilities.access_types]
        return {
            "adapter_type": self.__class__.__name__,
            "database_type": self.name,
            "sqlglot_dialect": self.get_default_dialect(),
            "access_type": self.config.access_type.value,
            "driver_class": self.driver_class(),
            "default_port": self.default_port(),
            "capabilities": capabilities,
            "attributes": dict(self.config.attributes),
            "reserved_words": len(self.RESERVED_WORDS),
            "used_libraries": list(self.USED_LIBRARIES),
            "extra_options_help": self.EXTRA_OPTIONS_HELP_TEXT,
        }
