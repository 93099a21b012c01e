"""
Data dictionary probing for dialect adapters.

The index probe is mixed into DialectAdapter via multiple inheritance. It is the
only adapter operation that performs I/O, and it does so exclusively through a
QueryExecutor supplied by the caller.
"""

from collections.abc import Sequence
from typing import Any, Protocol

from dbmeta.exceptions import IntrospectionError


class QueryExecutor(Protocol):
    """Minimal execution surface the adapters need from the host."""

    def open_query(self, sql: str) -> Any | None:
        """Run a query and return a result handle, or None when there is no result set."""
        ...

    def next_row(self, handle: Any) -> Any | None:
        """Return the next row of the handle, or None when exhausted."""
        ...

    def close_query(self, handle: Any) -> None: ...

    def column_value(self, row: Any, name: str, default: str) -> str: ...

    def quote_identifier(self, name: str) -> str: ...

    def quoted_schema_table_name(self, schema: str | None, table: str) -> str: ...


class DBAPIQueryExecutor:
    """
    QueryExecutor backed by a DB-API 2.0 connection.

    Rows are returned as dictionaries keyed by the cursor's column names.
    """

    def __init__(self, connection: Any, quote_char: str = '"') -> None:
        self.connection = connection
        self.quote_char = quote_char

    def open_query(self, sql: str) -> Any | None:
        cursor = self.connection.cursor()
        try:
            cursor.execute(sql)
        except Exception:
            cursor.close()
            raise
        if cursor.description is None:
            cursor.close()
            return None
        return cursor

    def next_row(self, handle: Any) -> dict[str, Any] | None:
        row = handle.fetchone()
        if row is None:
            return None
        columns = [desc[0] for desc in handle.description]
        return dict(zip(columns, row))

    def close_query(self, handle: Any) -> None:
        handle.close()

    def column_value(self, row: dict[str, Any], name: str, default: str) -> str:
        for key, value in row.items():
            if key.upper() == name.upper():
                return default if value is None else str(value)
        return default

    def quote_identifier(self, name: str) -> str:
        if name.startswith(self.quote_char) and name.endswith(self.quote_char):
            return name
        return f"{self.quote_char}{name}{self.quote_char}"

    def quoted_schema_table_name(self, schema: str | None, table: str) -> str:
        if schema:
            return f"{self.quote_identifier(schema)}.{self.quote_identifier(table)}"
        return self.quote_identifier(table)


class MetadataHandler:
    """Mixin class for data dictionary lookups."""

    def index_columns_query(self, table_name: str) -> str:
        """SQL listing the indexed columns of a table owned by the current user."""
        escaped = table_name.replace("'", "''")
        return f"SELECT * FROM USER_IND_COLUMNS WHERE TABLE_NAME = '{escaped}'"

    def index_covers_fields(
        self,
        executor: QueryExecutor,
        schema_name: str | None,
        table_name: str,
        fields: Sequence[str],
    ) -> bool:
        """
        Check whether every requested field appears in an index on the table.

        Args:
            executor: Query collaborator bound to a live connection
            schema_name: Schema of the table (used for diagnostics)
            table_name: Table to inspect
            fields: Column names that must all be indexed

        Returns:
            True if every field was found among the indexed columns, False otherwise
            (including when the data dictionary query yields no result set)

        Raises:
            IntrospectionError: If running or reading the query fails
        """
        # Raw name until the collaborator has quoted it
        qualified_name = table_name
        seen = [False] * len(fields)

        try:
            qualified_name = executor.quoted_schema_table_name(schema_name, table_name)
            handle = executor.open_query(self.index_columns_query(table_name))
            if handle is None:
                self.logger.debug(f"No result set while probing indexes on {qualified_name}")
                return False
            try:
                row = executor.next_row(handle)
                while row is not None:
                    column = executor.column_value(row, "COLUMN_NAME", "")
                    for idx, field_name in enumerate(fields):
                        if field_name == column:
                            seen[idx] = True
                    row = executor.next_row(handle)
            finally:
                executor.close_query(handle)
        except Exception as e:
            self.logger.error(f"Index probe failed on {qualified_name}: {e}")
            raise IntrospectionError(qualified_name, e) from e

        return all(seen)
