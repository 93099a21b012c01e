"""
SQL text helpers for dialect adapters.

These methods are mixed into DialectAdapter via multiple inheritance.
"""

import sqlglot
from sqlglot.errors import TokenError
from sqlglot.tokens import TokenType

from dbmeta.exceptions import InvalidInputError


class SQLProcessor:
    """Mixin class for splitting and quoting SQL text."""

    def split_script(self, script: str) -> list[str]:
        """
        Split a multi-statement script into individual statements.

        Statements are separated by semicolons outside string literals, quoted
        identifiers and comments. Blank statements are dropped.

        Args:
            script: SQL script, e.g. the output of modify_column_statement

        Returns:
            List of trimmed statements without their terminating semicolon

        Raises:
            InvalidInputError: If the script cannot be tokenized
        """
        if not script or not script.strip():
            return []

        try:
            tokens = sqlglot.tokenize(script, read=self.get_default_dialect())
        except TokenError as e:
            self.logger.error(f"Failed to tokenize script for {self.get_default_dialect()}: {e}")
            raise InvalidInputError(f"Unable to split SQL script: {e}") from e

        statements = []
        segment_start = 0
        has_tokens = False
        for token in tokens:
            if token.token_type == TokenType.SEMICOLON:
                if has_tokens:
                    statements.append(script[segment_start : token.start].strip())
                segment_start = token.end + 1
                has_tokens = False
            else:
                has_tokens = True

        if has_tokens:
            statements.append(script[segment_start:].strip())

        self.logger.debug(f"Split script into {len(statements)} statements")
        return statements

    def quote_sql_string(self, text: str) -> str:
        """Quote a string literal for use in an insert, update or delete statement."""
        text = text.replace("'", "''")
        text = text.replace("\n", "'||chr(13)||'")
        text = text.replace("\r", "'||chr(10)||'")
        return f"'{text}'"
