"""Table listing and description tools."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Protocol

from manticore_tools.errors import ToolError

_log = logging.getLogger(__name__)


class _SqlClient(Protocol):
    def execute_sql(self, sql: str) -> list[dict[str, Any]]: ...


def build_table_name(cluster: str, table: str) -> str:
    """Return the table name, prefixed with ``cluster:`` when a cluster is given."""
    return f"{cluster}:{table}" if cluster else table


def _escape_like(pattern: str) -> str:
    return pattern.replace("\\", "\\\\").replace("'", "\\'")


@dataclass
class ShowTablesArgs:
    """Arguments of the show_tables tool."""

    pattern: str = ""
    cluster: str = ""


@dataclass
class DescribeTableArgs:
    """Arguments of the describe_table tool."""

    table: str = ""
    cluster: str = ""


class TablesHandler:
    """Runs table management statements against Manticore."""

    def __init__(self, client: _SqlClient, logger: logging.Logger | None = None) -> None:
        self._client = client
        self._logger = logger or _log

    def show_tables(self, args: ShowTablesArgs) -> list[dict[str, Any]]:
        """List tables, optionally filtered by a LIKE pattern."""
        sql = "SHOW TABLES"
        if args.pattern:
            sql += f" LIKE '{_escape_like(args.pattern)}'"
        self._logger.debug("Executing show tables query: %s", sql)
        try:
            return self._client.execute_sql(sql)
        except Exception as err:
            raise ToolError(f"show tables failed: {err}") from err

    def describe_table(self, args: DescribeTableArgs) -> list[dict[str, Any]]:
        """Return the structure of a table."""
        if not args.table:
            raise ValueError("table parameter is required")
        sql = "DESCRIBE " + build_table_name(args.cluster, args.table)
        self._logger.debug("Executing describe table query: %s", sql)
        try:
            return self._client.execute_sql(sql)
        except Exception as err:
            raise ToolError(f"describe table failed: {err}") from err