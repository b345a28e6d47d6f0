"""Test fixtures and helpers."""

import io
import shutil
import tempfile
from pathlib import Path

import pytest
from rich.console import Console

from schema_scaffold.core.schemas import Column, Database, KeyRole, Table


class ScriptedLineReader:
    """Line reader that replays a fixed script and records the prompts shown.

    Returns None once the script is used up, like a closed stdin.
    """

    def __init__(self, lines: list[str]) -> None:
        self.lines = list(lines)
        self.prompts: list[tuple[str, str | None]] = []

    def read_line(self, prompt: str, style: str | None = None) -> str | None:
        self.prompts.append((prompt, style))
        if not self.lines:
            return None
        return self.lines.pop(0)


@pytest.fixture
def console_output():
    """StringIO capturing everything printed to the test console."""
    return io.StringIO()


@pytest.fixture
def console(console_output):
    """Plain-text console writing into console_output."""
    return Console(file=console_output, width=200, color_system=None)


@pytest.fixture
def scripted_reader():
    """Factory for ScriptedLineReader instances."""
    return ScriptedLineReader


@pytest.fixture
def temp_output_dir():
    """Create a temporary output directory."""
    temp_dir = Path(tempfile.mkdtemp())
    yield temp_dir
    shutil.rmtree(temp_dir)


@pytest.fixture
def shop_databases():
    """Two databases sharing a table name, with a mix of column kinds."""
    users = Table(
        name="users",
        columns=[
            Column(
                name="id",
                declared_type="INT",
                nullability="not",
                key=KeyRole.PRIMARY,
                auto_increment=True,
            ),
            Column(name="email", declared_type="VARCHAR", length="255", nullability="not", key=KeyRole.UNIQUE),
            Column(name="created_at", declared_type="DATETIME", nullability="null"),
        ],
    )
    orders = Table(
        name="orders",
        columns=[
            Column(name="user_id", declared_type="BIGINT", nullability="not", key=KeyRole.FOREIGN),
            Column(name="total", declared_type="DOUBLE", nullability="null"),
            Column(name="payload", declared_type="json", nullability="null"),
        ],
    )
    audit_users = Table(
        name="users",
        columns=[Column(name="active", declared_type="BOOL", nullability="not")],
    )
    return [
        Database(name="shop", tables=[users, orders]),
        Database(name="audit", tables=[audit_users]),
    ]
