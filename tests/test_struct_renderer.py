"""Tests for the StructRenderer class."""

import logging

import pytest

from schema_scaffold.core.schemas import Column, Database, Table
from schema_scaffold.rendering.struct_renderer import StructRenderer, title_case

HEADER = 'package structs\n\nimport (\n\t"time"\n)\n\n'


@pytest.mark.parametrize(
    "name, expected",
    [
        ("id", "Id"),
        ("ID", "Id"),
        ("staff", "Staff"),
        ("user_id", "User_id"),
        ("order-line", "Order-Line"),
        ("userName", "Username"),
    ],
)
def test_title_case(name, expected):
    assert title_case(name) == expected


class TestStructRenderer:
    """Test suite for StructRenderer."""

    def test_header_only_for_no_databases(self):
        assert StructRenderer().render([]) == HEADER

    def test_custom_package_name(self):
        assert StructRenderer("models").render([]).startswith("package models\n")

    def test_render_single_table(self):
        database = Database(
            name="employees",
            tables=[
                Table(
                    name="staff",
                    columns=[Column(name="id", declared_type="INT", nullability="not")],
                )
            ],
        )

        output = StructRenderer().render([database])

        assert output == HEADER + 'type Staff struct {\n\tId\tint `json:"id"`\n}\n\n'

    def test_render_all_target_types(self, shop_databases):
        output = StructRenderer().render(shop_databases)

        assert '\tId\tint `json:"id"`\n' in output
        assert '\tEmail\tstring `json:"email"`\n' in output
        assert '\tCreated_at\ttime.Time `json:"created_at"`\n' in output
        assert '\tUser_id\tint `json:"user_id"`\n' in output
        assert '\tTotal\tfloat64 `json:"total"`\n' in output
        assert '\tPayload\tinterface{} `json:"payload"`\n' in output
        assert '\tActive\tbool `json:"active"`\n' in output

    def test_tables_rendered_in_collection_order(self, shop_databases):
        output = StructRenderer().render(shop_databases)

        assert output.count("type Users struct {") == 2
        assert output.index("type Users struct {") < output.index("type Orders struct {")

    def test_empty_table_renders_empty_struct(self):
        output = StructRenderer().render_table(Table(name="empty"))
        assert output == "type Empty struct {\n}\n\n"

    def test_field_name_clash_is_logged(self, caplog):
        table = Table(
            name="t",
            columns=[
                Column(name="id", declared_type="INT", nullability="not"),
                Column(name="ID", declared_type="INT", nullability="not"),
            ],
        )

        with caplog.at_level(logging.WARNING, logger="SchemaScaffold"):
            output = StructRenderer().render_table(table)

        assert 'json:"ID"' in output
        assert "Field name 'Id' is repeated" in caplog.text

    def test_render_is_deterministic(self, shop_databases):
        renderer = StructRenderer()
        assert renderer.render(shop_databases) == renderer.render(shop_databases)
