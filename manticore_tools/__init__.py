"""SQL and JSON query builders and a table tool for Manticore Search."""

__version__ = "0.1.0"

__all__ = [
    "errors",
    "tables",
    "search_args",
    "search_sql",
    "query_builder",
]