"""
Tests for behavior shared by all dialect adapters.
"""

import pytest

from dbmeta.adapters.base import (
    AccessType,
    AdapterConfig,
    ColumnChangeRequest,
    ColumnSpec,
    LogicalType,
)
from dbmeta.adapters.dm.adapter import DMAdapter
from dbmeta.adapters.oscar.adapter import OscarAdapter
from dbmeta.exceptions import InvalidInputError


class TestColumnSpec:
    """Test the column model."""

    def test_string_type_is_coerced(self):
        """Test that logical types can be given by name."""
        assert ColumnSpec("A", "string").logical_type == LogicalType.STRING
        assert ColumnSpec("A", "BigNumber").logical_type == LogicalType.BIGNUMBER
        assert ColumnSpec("A", "no-such-type").logical_type == LogicalType.NONE

    def test_rendered_name(self):
        """Test quoting of rendered names."""
        assert ColumnSpec("a", LogicalType.STRING).rendered_name == "a"
        assert ColumnSpec("a", LogicalType.STRING, quoted=True).rendered_name == '"a"'
        assert ColumnSpec('"a"', LogicalType.STRING, quoted=True).rendered_name == '"a"'

    def test_renamed_keeps_type(self):
        """Test that renaming keeps every other attribute."""
        column = ColumnSpec("A", LogicalType.NUMBER, length=10, precision=2, quoted=True)
        renamed = column.renamed("B")
        assert renamed.name == "B"
        assert (renamed.logical_type, renamed.length, renamed.precision, renamed.quoted) == (
            LogicalType.NUMBER,
            10,
            2,
            True,
        )
        assert column.name == "A"


class TestTemporaryColumnName:
    """Test derivation of the scratch column used for type changes."""

    def test_plain_name(self, any_adapter):
        """Test suffixing of a plain name."""
        assert any_adapter.temporary_column_name("PRICE") == "PRICE_KTL"

    def test_quoted_name(self, any_adapter):
        """Test that quotes are stripped and re-applied."""
        assert any_adapter.temporary_column_name('"Unit Price"') == '"Unit Price_KTL"'

    def test_long_name_is_truncated(self, any_adapter):
        """Test that the base name is cut to 30 characters."""
        name = "A" * 40
        assert any_adapter.temporary_column_name(name) == "A" * 30 + "_KTL"
        assert any_adapter.temporary_column_name(f'"{name}"') == '"' + "A" * 30 + '_KTL"'

    def test_single_quote_character_is_not_quoted(self, any_adapter):
        """Test that a lone double quote is treated as part of the name."""
        assert any_adapter.temporary_column_name('"') == '"_KTL'


class TestColumnFromCatalog:
    """Test reading precision and scale from the data dictionary."""

    @pytest.mark.parametrize(
        "precision,scale,expected_type",
        [
            (0, 0, LogicalType.NUMBER),
            (-1, -1, LogicalType.NUMBER),
            (10, 2, LogicalType.NUMBER),
            (20, 2, LogicalType.BIGNUMBER),
            (10, 16, LogicalType.BIGNUMBER),
            (9, 0, LogicalType.INTEGER),
            (18, 0, LogicalType.INTEGER),
            (19, 0, LogicalType.BIGNUMBER),
            (38, 0, LogicalType.INTEGER),
        ],
    )
    def test_logical_type(self, any_adapter, precision, scale, expected_type):
        """Test the chosen logical type."""
        assert any_adapter.column_from_catalog("C", precision, scale).logical_type == expected_type

    def test_strict_number_38(self, any_adapter):
        """Test that strict interpretation reads NUMBER(38) as a big number."""
        any_adapter.strict_big_number_interpretation = True
        assert any_adapter.get_attribute("STRICT_NUMBER_38_INTERPRETATION") == "Y"
        assert any_adapter.column_from_catalog("C", 38, 0).logical_type == LogicalType.BIGNUMBER

    def test_length_and_precision(self, any_adapter):
        """Test that precision becomes length and scale becomes precision."""
        column = any_adapter.column_from_catalog("C", 12, 3)
        assert (column.length, column.precision) == (12, 3)

        unsized = any_adapter.column_from_catalog("C", 0, 0)
        assert (unsized.length, unsized.precision) == (-1, -1)


class TestAttributeStore:
    """Test the adapter-local attribute store."""

    def test_flags_default_to_off(self, any_adapter):
        """Test default flag values."""
        assert any_adapter.strict_big_number_interpretation is False
        assert any_adapter.supports_boolean_data_type is False
        assert any_adapter.supports_timestamp_data_type is False

    def test_flags_from_config(self):
        """Test flags set through configuration, booleans included."""
        adapter = DMAdapter(
            {
                "type": "dm",
                "attributes": {"SUPPORTS_BOOLEAN_DATA_TYPE": True, "STRICT_NUMBER_38_INTERPRETATION": "y"},
            }
        )
        assert adapter.supports_boolean_data_type is True
        assert adapter.strict_big_number_interpretation is True

    def test_instances_do_not_share_attributes(self):
        """Test that setting a flag on one adapter leaves another alone."""
        first = OscarAdapter()
        second = OscarAdapter()
        first.supports_boolean_data_type = True
        assert second.supports_boolean_data_type is False


class TestAdapterConfigValidation:
    """Test configuration validation."""

    def test_default_config(self):
        """Test adapters created without a config."""
        adapter = DMAdapter()
        assert adapter.config.type == "dm"
        assert adapter.config.access_type == AccessType.NATIVE

    def test_config_object(self):
        """Test adapters created from an AdapterConfig."""
        config = AdapterConfig(type="oscar", access_type=AccessType.ODBC, database="DSN1")
        adapter = OscarAdapter(config)
        assert adapter.connection_url() == "jdbc:odbc:DSN1"

    def test_shared_config_object_is_copied(self):
        """Test that adapters built from one AdapterConfig keep separate attribute stores."""
        config = AdapterConfig(type="dm")
        first = DMAdapter(config)
        second = DMAdapter(config)

        first.supports_boolean_data_type = True

        boolean_column = ColumnSpec("ACTIVE", LogicalType.BOOLEAN)
        assert first.map_type(boolean_column) == "BOOLEAN"
        assert second.map_type(boolean_column) == "CHAR(1)"
        assert config.attributes == {}

    def test_config_object_attributes_are_normalized(self):
        """Test boolean attribute values in an AdapterConfig."""
        config = AdapterConfig(type="oscar", attributes={"SUPPORTS_BOOLEAN_DATA_TYPE": True})
        adapter = OscarAdapter(config)
        assert adapter.get_attribute("SUPPORTS_BOOLEAN_DATA_TYPE") == "Y"
        assert adapter.map_type(ColumnSpec("ACTIVE", LogicalType.BOOLEAN)) == "BOOLEAN"

    def test_config_object_access_type_is_parsed(self):
        """Test a plain string access type in an AdapterConfig."""
        adapter = DMAdapter(AdapterConfig(type="dm", access_type="ODBC"))
        assert adapter.config.access_type == AccessType.ODBC
        assert adapter.get_database_info()["access_type"] == "odbc"

    def test_config_object_is_validated(self):
        """Test that AdapterConfig values go through the same validation as dicts."""
        with pytest.raises(ValueError, match="Port must be between"):
            DMAdapter(AdapterConfig(type="dm", port=70000))
        with pytest.raises(ValueError, match="Unknown access type"):
            DMAdapter(AdapterConfig(type="dm", access_type="telnet"))

    def test_config_dict_attributes_are_copied(self):
        """Test that the caller's attribute mapping is not the adapter's store."""
        attributes = {"SUPPORTS_BOOLEAN_DATA_TYPE": "N"}
        adapter = DMAdapter({"type": "dm", "attributes": attributes})
        adapter.supports_boolean_data_type = True
        assert attributes == {"SUPPORTS_BOOLEAN_DATA_TYPE": "N"}

    def test_missing_type(self):
        """Test that the type is required."""
        with pytest.raises(ValueError, match="Missing required fields"):
            DMAdapter({"host": "localhost"})

    @pytest.mark.parametrize("port", [0, 70000, "abc", 3.5])
    def test_invalid_port(self, port):
        """Test port validation."""
        with pytest.raises(ValueError):
            DMAdapter({"type": "dm", "port": port})

    @pytest.mark.parametrize("port", [5236, "5236", -1, "-1", ""])
    def test_valid_port(self, port):
        """Test accepted ports."""
        assert DMAdapter({"type": "dm", "port": port}).config.port == port

    def test_invalid_access_type(self):
        """Test access type validation."""
        with pytest.raises(ValueError, match="Unknown access type"):
            DMAdapter({"type": "dm", "access_type": "telnet"})

    def test_invalid_attributes(self):
        """Test attributes must be a mapping."""
        with pytest.raises(ValueError, match="Attributes"):
            DMAdapter({"type": "dm", "attributes": ["A=B"]})


class TestSharedGenerators:
    """Test generators with identical output in both dialects."""

    def test_render_column_change(self, any_adapter, string_column):
        """Test dispatch of column change requests."""
        request = ColumnChangeRequest(table_name="T", column=string_column, semicolon=True)
        assert any_adapter.render_column_change(request, "add") == any_adapter.add_column_statement(
            "T", string_column, semicolon=True
        )
        assert any_adapter.render_column_change(request, "drop").endswith(" NAME;")
        assert any_adapter.render_column_change(request, "modify") == (
            any_adapter.modify_column_statement("T", string_column, semicolon=True)
        )

    def test_render_column_change_unknown_action(self, any_adapter, string_column):
        """Test InvalidInputError for unknown actions."""
        request = ColumnChangeRequest(table_name="T", column=string_column)
        with pytest.raises(InvalidInputError, match="Unknown column action"):
            any_adapter.render_column_change(request, "rename")

    def test_lock_tables(self, any_adapter):
        """Test one exclusive lock per table and no unlock statement."""
        assert any_adapter.lock_tables_statement(["A", "B"]) == (
            "LOCK TABLE A IN EXCLUSIVE MODE;\nLOCK TABLE B IN EXCLUSIVE MODE;\n"
        )
        assert any_adapter.lock_tables_statement([]) == ""
        assert any_adapter.unlock_tables_statement(["A"]) is None

    def test_probe_queries(self, any_adapter):
        """Test table and column existence queries."""
        assert any_adapter.table_exists_sql("T") == "SELECT * FROM T WHERE 1=0"
        assert any_adapter.query_fields_sql("T") == "SELECT * FROM T WHERE 1=0"
        assert any_adapter.column_exists_sql("C", "T") == "SELECT C FROM T WHERE 1=0"
        assert any_adapter.limit_clause(10) == " WHERE ROWNUM <= 10"

    def test_sequence_exists_unqualified(self, any_adapter):
        """Test that unqualified names look in USER_SEQUENCES."""
        assert (
            any_adapter.sequence_exists_query("order_seq")
            == "SELECT * FROM USER_SEQUENCES WHERE SEQUENCE_NAME = 'ORDER_SEQ'"
        )

    def test_sequence_exists_qualified(self, any_adapter):
        """Test that qualified names look in ALL_SEQUENCES by owner."""
        assert any_adapter.sequence_exists_query("sales.order_seq") == (
            "SELECT * FROM ALL_SEQUENCES WHERE SEQUENCE_NAME = 'ORDER_SEQ' "
            "AND SEQUENCE_OWNER = 'SALES'"
        )

    def test_sequence_exists_splits_on_first_dot(self, any_adapter):
        """Test that further dots stay in the sequence name."""
        assert any_adapter.sequence_exists_query("s.a.b") == (
            "SELECT * FROM ALL_SEQUENCES WHERE SEQUENCE_NAME = 'A.B' AND SEQUENCE_OWNER = 'S'"
        )

    def test_sequence_values_and_creation(self, any_adapter):
        """Test currval, nextval and CREATE SEQUENCE."""
        assert any_adapter.current_sequence_value_query("S1") == "SELECT S1.currval FROM DUAL"
        assert any_adapter.next_sequence_value_query("S1") == "SELECT S1.nextval FROM dual"
        assert (
            any_adapter.create_sequence_statement("S1")
            == "CREATE SEQUENCE S1 START WITH 1 INCREMENT BY 1 NOMAXVALUE"
        )
        assert (
            any_adapter.create_sequence_statement("S1", max_value=500)
            == "CREATE SEQUENCE S1 START WITH 1 INCREMENT BY 1 MAXVALUE 500"
        )

    @pytest.mark.parametrize("name", ["", "   ", None])
    def test_empty_sequence_name(self, any_adapter, name):
        """Test InvalidInputError for empty sequence names."""
        with pytest.raises(InvalidInputError):
            any_adapter.sequence_exists_query(name)
        with pytest.raises(InvalidInputError):
            any_adapter.next_sequence_value_query(name)

    def test_list_sequences(self, any_adapter):
        """Test the sequence listing."""
        assert any_adapter.list_sequences_query() == "SELECT SEQUENCE_NAME FROM all_sequences"

    def test_quote_sql_string(self, any_adapter):
        """Test quoting of string literals."""
        assert any_adapter.quote_sql_string("it's") == "'it''s'"
        assert any_adapter.quote_sql_string("a\nb") == "'a'||chr(13)||'b'"
        assert any_adapter.quote_sql_string("a\rb") == "'a'||chr(10)||'b'"

    def test_database_info(self, any_adapter):
        """Test the summary returned by get_database_info."""
        info = any_adapter.get_database_info()
        assert info["database_type"] == any_adapter.name
        assert info["adapter_type"] == any_adapter.__class__.__name__
        assert info["default_port"] == any_adapter.capabilities.native_port
        assert info["capabilities"]["access_types"] == ["native", "jndi"]
        assert info["reserved_words"] == len(any_adapter.reserved_words)
        assert info["used_libraries"]
