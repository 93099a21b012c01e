"""
Dameng (DM) dialect adapter.

DM follows Oracle conventions: VARCHAR2/CLOB character types, an unsized
NUMBER family, sequences read through USER_SEQUENCES/ALL_SEQUENCES and no
DROP TABLE IF EXISTS.
"""

from dbmeta.adapters.base import (
    AccessType,
    ColumnSpec,
    DialectAdapter,
    DialectCapabilities,
    LogicalType,
)
from dbmeta.adapters.base.metadata import QueryExecutor
from dbmeta.adapters.registry import register_adapter
from dbmeta.variables import VariableSpace

from .reserved_words import RESERVED_WORDS


class DMAdapter(DialectAdapter):
    """Dameng database dialect adapter."""

    name = "dm"
    capabilities = DialectCapabilities(
        native_port=12345,
        # Depends on the page size: 4K -> 1900, 8K -> 3900, 16K -> 8000, 32K -> 8188
        max_varchar_length=1900,
        max_columns_in_index=32,
        access_types=(AccessType.NATIVE, AccessType.JNDI),
        supports_sequences=True,
        supports_sequence_no_max_value_option=True,
        supports_synonyms=True,
        supports_auto_inc=False,
        auto_increment_type=None,
        supports_drop_table_if_exists=False,
        supports_options_in_url=False,
        supports_prepared_statement_metadata_retrieval=False,
        supports_error_handling_on_batch_updates=False,
        supports_repository=True,
        requires_schema_for_table_list=True,
        requires_create_table_primary_key_append=True,
        needs_to_lock_all_tables=False,
        releases_savepoints=False,
    )
    RESERVED_WORDS = RESERVED_WORDS
    LARGE_TEXT_TYPE = "CLOB"
    VARCHAR_TYPE = "VARCHAR2"
    BINARY_TYPE = "BLOB"
    DROP_COLUMN_CLAUSE = "DROP"
    USED_LIBRARIES = ("DmJdbcDriver.jar",)
    EXTRA_OPTIONS_HELP_TEXT = "http://www.dameng.com"

    # SQLCODE raised when dropping a table that does not exist
    TABLE_NOT_FOUND_SQLCODE = -942

    def get_default_dialect(self) -> str:
        """DM scripts tokenize like Oracle."""
        return "oracle"

    def get_native_driver_class(self) -> str:
        return "dm.jdbc.driver.DmDriver"

    def _native_url(self, host: str, port: str, database_name: str) -> str:
        # jdbc:dm://host:port/databaseName
        if not port:
            port = str(self.capabilities.native_port)
        return f"jdbc:dm://{host}:{port}{database_name}"

    def _numeric_type(
        self,
        column: ColumnSpec,
        technical_key: str | None,
        primary_key: str | None,
        use_autoinc: bool,
    ) -> str:
        if column.logical_type == LogicalType.INTEGER:
            return "INTEGER"

        retval = "NUMBER"
        if column.length > 0:
            retval += f"({column.length}"
            if column.precision > 0:
                retval += f", {column.precision}"
            retval += ")"
        return retval

    def drop_table_if_exists_statement(self, table_name: str) -> str:
        """Drop a table inside a block that only swallows the 'table does not exist' error."""
        self._require_name(table_name, "Table")
        return (
            f"BEGIN EXECUTE IMMEDIATE 'DROP TABLE {table_name}'; "
            f"EXCEPTION WHEN OTHERS THEN IF SQLCODE != {self.TABLE_NOT_FOUND_SQLCODE} "
            "THEN RAISE; END IF; END;"
        )

    def list_procedures_sql(self) -> str:
        return (
            "SELECT DISTINCT DECODE(package_name, NULL, '', package_name||'.') || object_name "
            "FROM user_arguments "
            "ORDER BY 1"
        )

    def tablespace_ddl(
        self, tablespace: str | None, variables: VariableSpace, quoter: QueryExecutor
    ) -> str:
        """Get the TABLESPACE clause, resolving variables before quoting the name."""
        if not tablespace:
            return ""
        return "TABLESPACE " + quoter.quote_identifier(variables.substitute_variables(tablespace))


# Register the adapter
register_adapter("dm", DMAdapter)
