"""SQL generation for simple full-text searches."""

from __future__ import annotations

from manticore_tools.search_args import HighlightOptions, SearchArgs
from manticore_tools.tables import build_table_name


def _quote(text: str) -> str:
    return "'" + text.replace("'", "''") + "'"


def _basic_options(args: SearchArgs) -> list[str]:
    options: list[str] = []
    if args.ranker:
        options.append("ranker=" + args.ranker)
    if args.max_matches > 0:
        options.append(f"max_matches={args.max_matches}")
    if args.cutoff > 0:
        options.append(f"cutoff={args.cutoff}")
    if args.max_query_time > 0:
        options.append(f"max_query_time={args.max_query_time}")
    if args.field_weights:
        weights = ",".join(f"{name}={weight}" for name, weight in args.field_weights.items())
        options.append(f"field_weights=({weights})")
    if args.comment:
        options.append("comment=" + _quote(args.comment))
    return options


def _advanced_options(args: SearchArgs) -> list[str]:
    options: list[str] = []
    if args.not_terms_only_allowed > 0:
        options.append(f"not_terms_only_allowed={args.not_terms_only_allowed}")
    if args.boolean_simplify == 0:
        options.append("boolean_simplify=0")
    if args.accurate_aggregation > 0:
        options.append(f"accurate_aggregation={args.accurate_aggregation}")
    if args.rand_seed > 0:
        options.append(f"rand_seed={args.rand_seed}")
    if args.morphology:
        options.append("morphology=" + args.morphology)
    if args.token_filter:
        options.append("token_filter=" + _quote(args.token_filter))
    if args.max_predicted_time > 0:
        options.append(f"max_predicted_time={args.max_predicted_time}")
    return options


def _agent_options(args: SearchArgs) -> list[str]:
    options: list[str] = []
    if args.agent_query_timeout > 0:
        options.append(f"agent_query_timeout={args.agent_query_timeout}")
    if args.retry_count > 0:
        options.append(f"retry_count={args.retry_count}")
    if args.retry_delay > 0:
        options.append(f"retry_delay={args.retry_delay}")
    return options


def _fuzzy_options(args: SearchArgs) -> list[str]:
    fuzzy = args.fuzzy
    if fuzzy is None or not fuzzy.enabled:
        return []
    options = ["fuzzy=1"]
    if fuzzy.distance > 0:
        options.append(f"distance={fuzzy.distance}")
    if fuzzy.preserve > 0:
        options.append(f"preserve={fuzzy.preserve}")
    if fuzzy.layouts:
        options.append("layouts='" + ",".join(fuzzy.layouts) + "'")
    return options


def build_sql_options(args: SearchArgs) -> str:
    """Return the body of the OPTION clause, or an empty string."""
    return ", ".join(
        _basic_options(args)
        + _advanced_options(args)
        + _agent_options(args)
        + _fuzzy_options(args)
    )


def build_highlight_function(highlight: HighlightOptions, query: str) -> str:
    """Return a ``HIGHLIGHT(...) AS highlight`` select item, or "" when disabled.

    The query argument is accepted for symmetry; HIGHLIGHT() falls back to the
    MATCH query on its own.
    """
    if not highlight.enabled:
        return ""

    settings: list[str] = []
    if highlight.limit > 0:
        settings.append(f"limit={highlight.limit}")
    if highlight.limit_per_field > 0:
        settings.append(f"limit_per_field={highlight.limit_per_field}")
    if highlight.limit_words > 0:
        settings.append(f"limit_words={highlight.limit_words}")
    if highlight.around > 0:
        settings.append(f"around={highlight.around}")
    if highlight.start_tag:
        settings.append("before_match=" + _quote(highlight.start_tag))
    if highlight.end_tag:
        settings.append("after_match=" + _quote(highlight.end_tag))

    parts: list[str] = []
    if settings:
        parts.append("{" + ", ".join(settings) + "}")
    if highlight.fields:
        parts.append("'" + ",".join(highlight.fields) + "'")
    return "HIGHLIGHT(" + ", ".join(parts) + ") AS highlight"


def build_search_sql(args: SearchArgs) -> str:
    """Build the SELECT statement of a simple full-text search."""
    select_items = ", ".join(args.fields) if args.fields else "*"
    if args.highlight is not None and args.highlight.enabled:
        highlight = build_highlight_function(args.highlight, args.query)
        if highlight:
            select_items += ", " + highlight

    sql = (
        f"SELECT {select_items} FROM {build_table_name(args.cluster, args.table)}"
        f" WHERE MATCH({_quote(args.query)})"
    )
    sql += "".join(f" AND ({condition})" for condition in args.where)

    if args.group_by:
        sql += " GROUP BY " + ", ".join(args.group_by)
        if args.group_sort:
            sql += " ORDER BY " + args.group_sort
    elif args.order_by:
        sql += " ORDER BY " + ", ".join(args.order_by)

    if args.limit > 0:
        sql += f" LIMIT {args.limit}"
    if args.offset > 0:
        sql += f" OFFSET {args.offset}"

    options = build_sql_options(args)
    if options:
        sql += " OPTION " + options
    return sql