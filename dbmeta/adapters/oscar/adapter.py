"""
ShenTong (Oscar) dialect adapter.

Oscar mixes PostgreSQL types (TEXT, BIGSERIAL, DOUBLE PRECISION) with Oracle
style catalogs (USER_SEQUENCES, USER_IND_COLUMNS) and supports
DROP TABLE IF EXISTS natively.
"""

from dbmeta.adapters.base import AccessType, ColumnSpec, DialectAdapter, DialectCapabilities
from dbmeta.adapters.registry import register_adapter

from .reserved_words import RESERVED_WORDS


class OscarAdapter(DialectAdapter):
    """ShenTong (Oscar) database dialect adapter."""

    name = "oscar"
    capabilities = DialectCapabilities(
        native_port=2003,
        max_varchar_length=2000,
        max_columns_in_index=32,
        access_types=(AccessType.NATIVE, AccessType.JNDI),
        supports_sequences=True,
        supports_sequence_no_max_value_option=True,
        supports_synonyms=True,
        supports_auto_inc=False,
        auto_increment_type="BIGSERIAL",
        supports_drop_table_if_exists=True,
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
    LARGE_TEXT_TYPE = "TEXT"
    VARCHAR_TYPE = "VARCHAR"
    BINARY_TYPE = "BLOB"
    DROP_COLUMN_CLAUSE = "DROP COLUMN"
    USED_LIBRARIES = ("oscarJDBC.jar", "oscarJDBC14.jar", "oscarJDBC16.jar")
    EXTRA_OPTIONS_HELP_TEXT = "http://www.shentongdata.com/?bid=3&eid=249"

    def get_default_dialect(self) -> str:
        """Oscar scripts tokenize like PostgreSQL (dollar quoting included)."""
        return "postgres"

    def get_native_driver_class(self) -> str:
        return "com.oscar.Driver"

    def _native_url(self, host: str, port: str, database_name: str) -> str:
        # <host>/<database> or <host>:<port>/<database>
        port_segment = f":{port}" if port else ""
        return f"jdbc:oscar://{host}{port_segment}{database_name}"

    def _timestamp_type(self) -> str:
        return "TIMESTAMP"

    def _date_type(self) -> str:
        return "TIMESTAMP"

    def _numeric_type(
        self,
        column: ColumnSpec,
        technical_key: str | None,
        primary_key: str | None,
        use_autoinc: bool,
    ) -> str:
        auto_increment_type = self.capabilities.auto_increment_type
        if auto_increment_type and self.is_key_column(column, technical_key, primary_key):
            return auto_increment_type

        length = column.length
        precision = column.precision
        if length <= 0:
            return "DOUBLE PRECISION"

        if precision > 0 or length > 18:
            # NUMERIC(precision, scale): precision is the total number of digits
            return f"NUMERIC({length + precision}, {precision})"
        if precision == 0:
            if length > 9:
                return "BIGINT"
            if length < 5:
                return "SMALLINT"
            return "INT"
        return "FLOAT(53)"

    def drop_table_if_exists_statement(self, table_name: str) -> str:
        self._require_name(table_name, "Table")
        return f"DROP TABLE IF EXISTS {table_name}"

    def list_procedures_sql(self) -> str:
        return "SELECT name FROM ORM_FUNCTIONS union SELECT name FROM ORM_PROCEDURES"


# Register the adapter
register_adapter("oscar", OscarAdapter)
