"""
Capability flags describing what a dialect supports.
"""

from dataclasses import dataclass

from .config import AccessType

# Length from which a string column always becomes a large-object type.
CLOB_LENGTH = 9999999


@dataclass(frozen=True)
class DialectCapabilities:
    """
    Fixed facts about a dialect, shared by every adapter instance of that dialect.
    """

    native_port: int
    max_varchar_length: int
    long_text_threshold: int = CLOB_LENGTH
    max_columns_in_index: int = 0  # <= 0 means no known limit
    access_types: tuple[AccessType, ...] = (AccessType.NATIVE,)

    supports_sequences: bool = False
    supports_sequence_no_max_value_option: bool = False
    supports_synonyms: bool = False
    supports_auto_inc: bool = True
    auto_increment_type: str | None = None  # type emitted for key columns, if any
    supports_drop_table_if_exists: bool = True
    supports_options_in_url: bool = True
    supports_prepared_statement_metadata_retrieval: bool = True
    supports_error_handling_on_batch_updates: bool = True
    supports_repository: bool = False
    requires_schema_for_table_list: bool = False
    requires_create_table_primary_key_append: bool = False
    needs_to_lock_all_tables: bool = True
    releases_savepoints: bool = True

    def supports_access_type(self, access_type: AccessType) -> bool:
        return access_type in self.access_types
