# manticore-tools

Builders and a table tool for working with Manticore Search. The package
turns structured arguments into SQL statements and JSON search queries.
Table listing and description statements are handed to a client object
that you provide.

## Installation

```
pip install manticore-tools
```

For the test suite:

```
pip install "manticore-tools[test]"
pytest
```

## Errors

All exceptions derive from `manticore_tools.errors.ManticoreError`:

- `ToolError` is raised by a handler when the client fails; the client's
  exception is chained.
- `HTTPError(status_code, message)` is there for clients that need to report
  an error answer from the Manticore HTTP API; `str()` gives the message.
- `QueryBuildError` and its subclasses `InvalidClauseDataError` and
  `UnsupportedClauseTypeError` come from the query builder.

## Tables

`TablesHandler(client, logger=None)` takes a client with one method,
`execute_sql(sql)`, returning a list of row dicts. The logger is a standard
`logging.Logger`; without one the module's own logger is used.

```python
from manticore_tools.tables import TablesHandler, ShowTablesArgs, DescribeTableArgs

tables = TablesHandler(client)
tables.show_tables(ShowTablesArgs(pattern="test_table_%"))
tables.describe_table(DescribeTableArgs(table="products", cluster="main"))
```

`show_tables` runs `SHOW TABLES`, adding `LIKE '...'` when a pattern is
given, with backslashes and single quotes escaped by a backslash.
`describe_table` runs `DESCRIBE <table>` and raises `ValueError` when no
table is given.

`build_table_name(cluster, table)` gives `cluster:table`, or just `table`
when the cluster is empty.

## Search arguments

`manticore_tools.search_args` holds the dataclasses `SearchArgs`,
`HighlightOptions` and `FuzzyOptions`. `highlight` and `fuzzy` may be given
as plain dicts, as they come from decoded JSON, and are turned into their
option types.

## SQL search statements

```python
from manticore_tools.search_args import SearchArgs, HighlightOptions
from manticore_tools.search_sql import build_search_sql

sql = build_search_sql(SearchArgs(
    table="products",
    query="gaming laptop",
    where=["price > 1000"],
    order_by=["price DESC"],
    highlight=HighlightOptions(enabled=True, start_tag="<mark>", end_tag="</mark>"),
    limit=10,
))
```

The statement is `SELECT ... FROM ... WHERE MATCH('...')`, followed by the
`where` conditions joined with `AND`, `GROUP BY` (with `group_sort` as its
`ORDER BY`) or else `ORDER BY`, `LIMIT`, `OFFSET` and an `OPTION` clause.
`build_sql_options(args)` gives just the body of that `OPTION` clause and
`build_highlight_function(highlight, query)` the `HIGHLIGHT(...) AS
highlight` select item (an empty string when highlighting is off).

Note that `boolean_simplify=0` is always added to the options while
`boolean_simplify` is left at its default of `0`; set it to `1` to leave it
out.

## JSON queries

```python
from manticore_tools.query_builder import (
    BoolQuery, QueryBuilder, match_clause, range_clause, equals_clause,
)
from manticore_tools.search_args import SearchArgs

bool_query = BoolQuery(
    must=[match_clause("title", "laptop", "and"),
          range_clause("price", {"gte": 100, "lte": 500})],
    must_not=[equals_clause("status", "disabled")],
)
body = QueryBuilder("", "products").build_http_query(
    SearchArgs(table="products", bool_query=bool_query, limit=20)
)
```

`build_http_query` returns the request body as a dict: `table`, `query`
(the boolean query, a `match` on `*` for a plain query text, or
`match_all`), `limit`, `offset`, `_source`, `sort`, `highlight` and
`options`, each only when set. Clauses are made with `match_clause`,
`range_clause`, `equals_clause`, `in_clause`, `geo_distance_clause`,
`query_string_clause`, `match_all_clause` and `bool_clause`; an unknown
clause type raises `UnsupportedClauseTypeError`, and data of the wrong kind
for a clause raises `InvalidClauseDataError`.

## What this package does not do

- It carries no client: nothing here connects to a Manticore server. You
  pass a client with `execute_sql` to `TablesHandler`.
- It does not run searches. The search statements and JSON bodies are only
  built; sending them is up to you.
- It has no tools for inserting, updating or deleting documents.