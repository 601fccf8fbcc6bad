"""Construction of Manticore HTTP JSON search queries."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

from manticore_tools.errors import ManticoreError
from manticore_tools.search_args import HighlightOptions, SearchArgs
from manticore_tools.tables import build_table_name


class QueryBuildError(ManticoreError):
    """A search query could not be built."""


class InvalidClauseDataError(QueryBuildError):
    """A clause carries data of the wrong kind for its type."""

    def __init__(self, clause_type: str) -> None:
        super().__init__(f"invalid {clause_type} clause data")
        self.clause_type = clause_type


class UnsupportedClauseTypeError(QueryBuildError):
    """A clause has a type the builder does not know."""

    def __init__(self, clause_type: str) -> None:
        super().__init__(f"unsupported query clause type: {clause_type}")
        self.clause_type = clause_type


@dataclass
class QueryClause:
    """One clause of a boolean query: its type name and its data."""

    type: str
    data: Any = None


@dataclass
class BoolQuery:
    """A boolean query with must, should and must_not clauses."""

    must: list[QueryClause] = field(default_factory=list)
    should: list[QueryClause] = field(default_factory=list)
    must_not: list[QueryClause] = field(default_factory=list)


@dataclass
class MatchClause:
    """Full-text match on one field; operator is "and", "or" or empty."""

    field: str
    query: str
    operator: str = ""


@dataclass
class RangeClause:
    """Range filter; ranges maps gte, lte, gt, lt to bounds."""

    field: str
    ranges: dict[str, Any] = field(default_factory=dict)


@dataclass
class EqualsClause:
    """Equality filter on one attribute."""

    field: str
    value: Any = None


@dataclass
class InClause:
    """Filter matching any of several values."""

    field: str
    values: list[Any] = field(default_factory=list)


@dataclass
class GeoDistanceClause:
    """Geographic distance filter."""

    distance_type: str
    location_anchor: dict[str, float]
    location_source: str
    distance: str


@dataclass
class QueryStringClause:
    """Raw full-text query string."""

    query: str


@dataclass
class MatchAllClause:
    """Matches every document."""


class QueryBuilder:
    """Builds HTTP JSON queries for one table, optionally inside a cluster."""

    def __init__(self, cluster: str, table: str) -> None:
        self.cluster = cluster
        self.table = table

    def table_name(self) -> str:
        """Return the table name with the cluster prefix, if any."""
        return build_table_name(self.cluster, self.table)

    def build_http_query(self, args: SearchArgs) -> dict[str, Any]:
        """Build the JSON body of a search request from search arguments."""
        query: dict[str, Any] = {"table": self.table_name()}

        if args.bool_query is not None:
            if not isinstance(args.bool_query, BoolQuery):
                raise InvalidClauseDataError("bool")
            query["query"] = self.build_bool_query(args.bool_query)
        elif args.query:
            query["query"] = {"match": {"*": args.query}}
        else:
            query["query"] = {"match_all": {}}

        if args.limit > 0:
            query["limit"] = args.limit
        if args.offset > 0:
            query["offset"] = args.offset

        if args.fields:
            query["_source"] = args.fields

        if args.order_by:
            query["sort"] = [_sort_entry(expr) for expr in args.order_by]

        if args.highlight is not None and args.highlight.enabled:
            query["highlight"] = self.build_highlight_options(args.highlight)

        options = self.build_http_options(args)
        if options:
            query["options"] = options

        return query

    def build_bool_query(self, bool_query: BoolQuery) -> dict[str, Any]:
        """Build a ``{"bool": {...}}`` object; empty clause lists are left out."""
        bool_clause: dict[str, Any] = {}
        for key, clauses in (
            ("must", bool_query.must),
            ("should", bool_query.should),
            ("must_not", bool_query.must_not),
        ):
            if clauses:
                bool_clause[key] = self.build_query_clauses(clauses)
        return {"bool": bool_clause}

    def build_query_clauses(self, clauses: list[QueryClause]) -> list[dict[str, Any]]:
        """Build every clause of a list, in order."""
        return [self.build_clause(clause) for clause in clauses]

    def build_clause(self, clause: QueryClause) -> dict[str, Any]:
        """Build the JSON object of a single clause."""
        if clause.type == "match_all":
            return {"match_all": {}}
        entry = self._builders().get(clause.type)
        if entry is None:
            raise UnsupportedClauseTypeError(clause.type)
        data_type, build = entry
        if not isinstance(clause.data, data_type):
            raise InvalidClauseDataError(clause.type)
        return build(clause.data)

    def _builders(self) -> dict[str, tuple[type, Callable[[Any], dict[str, Any]]]]:
        return {
            "match": (MatchClause, self.build_match_clause),
            "range": (RangeClause, _build_range),
            "equals": (EqualsClause, _build_equals),
            "in": (InClause, _build_in),
            "geo_distance": (GeoDistanceClause, _build_geo_distance),
            "query_string": (QueryStringClause, _build_query_string),
            "bool": (BoolQuery, self.build_bool_query),
        }

    def build_match_clause(self, match: MatchClause) -> dict[str, Any]:
        """Build a match clause, in long form when an operator is given."""
        if match.operator:
            return {
                "match": {
                    match.field: {"query": match.query, "operator": match.operator}
                }
            }
        return {"match": {match.field: match.query}}

    def build_highlight_options(self, highlight: HighlightOptions) -> dict[str, Any]:
        """Build the highlight object; unset options are left out."""
        result: dict[str, Any] = {}
        if highlight.fields:
            result["fields"] = highlight.fields
        if highlight.limit > 0:
            result["limit"] = highlight.limit
        if highlight.limit_per_field > 0:
            result["limit_per_field"] = highlight.limit_per_field
        if highlight.limit_words > 0:
            result["limit_words"] = highlight.limit_words
        if highlight.around > 0:
            result["around"] = highlight.around
        if highlight.start_tag:
            result["before_match"] = highlight.start_tag
        if highlight.end_tag:
            result["after_match"] = highlight.end_tag
        if highlight.number_of_fragments > 0:
            result["number_of_fragments"] = highlight.number_of_fragments
        return result

    def build_http_options(self, args: SearchArgs) -> dict[str, Any]:
        """Build the options object of a search request."""
        options: dict[str, Any] = {}

        if args.ranker:
            options["ranker"] = args.ranker
        if args.max_matches > 0:
            options["max_matches"] = args.max_matches
        if args.cutoff > 0:
            options["cutoff"] = args.cutoff
        if args.max_query_time > 0:
            options["max_query_time"] = args.max_query_time
        if args.field_weights:
            options["field_weights"] = args.field_weights
        if args.comment:
            options["comment"] = args.comment

        if args.not_terms_only_allowed > 0:
            options["not_terms_only_allowed"] = args.not_terms_only_allowed
        if args.boolean_simplify == 0:
            options["boolean_simplify"] = 0
        if args.accurate_aggregation > 0:
            options["accurate_aggregation"] = args.accurate_aggregation
        if args.rand_seed > 0:
            options["rand_seed"] = args.rand_seed
        if args.morphology:
            options["morphology"] = args.morphology
        if args.token_filter:
            options["token_filter"] = args.token_filter
        if args.max_predicted_time > 0:
            options["max_predicted_time"] = args.max_predicted_time

        if args.agent_query_timeout > 0:
            options["agent_query_timeout"] = args.agent_query_timeout
        if args.retry_count > 0:
            options["retry_count"] = args.retry_count
        if args.retry_delay > 0:
            options["retry_delay"] = args.retry_delay

        return options


def _sort_entry(expr: str) -> dict[str, str]:
    parts = expr.split()
    if len(parts) >= 2:
        return {parts[0]: parts[1].lower()}
    return {expr: "asc"}


def _build_range(clause: RangeClause) -> dict[str, Any]:
    return {"range": {clause.field: clause.ranges}}


def _build_equals(clause: EqualsClause) -> dict[str, Any]:
    return {"equals": {clause.field: clause.value}}


def _build_in(clause: InClause) -> dict[str, Any]:
    return {"in": {clause.field: clause.values}}


def _build_geo_distance(clause: GeoDistanceClause) -> dict[str, Any]:
    return {
        "geo_distance": {
            "distance_type": clause.distance_type,
            "location_anchor": clause.location_anchor,
            "location_source": clause.location_source,
            "distance": clause.distance,
        }
    }


def _build_query_string(clause: QueryStringClause) -> dict[str, Any]:
    return {"query_string": clause.query}


def match_clause(field: str, query: str, operator: str = "") -> QueryClause:
    """Create a match clause."""
    return QueryClause("match", MatchClause(field, query, operator))


def range_clause(field: str, ranges: dict[str, Any]) -> QueryClause:
    """Create a range clause."""
    return QueryClause("range", RangeClause(field, ranges))


def equals_clause(field: str, value: Any) -> QueryClause:
    """Create an equals clause."""
    return QueryClause("equals", EqualsClause(field, value))


def in_clause(field: str, values: list[Any]) -> QueryClause:
    """Create an in clause."""
    return QueryClause("in", InClause(field, values))


def geo_distance_clause(
    distance_type: str, anchor: dict[str, float], source: str, distance: str
) -> QueryClause:
    """Create a geo_distance clause."""
    return QueryClause(
        "geo_distance", GeoDistanceClause(distance_type, anchor, source, distance)
    )


def query_string_clause(query: str) -> QueryClause:
    """Create a query_string clause."""
    return QueryClause("query_string", QueryStringClause(query))


def match_all_clause() -> QueryClause:
    """Create a match_all clause."""
    return QueryClause("match_all", MatchAllClause())


def bool_clause(bool_query: BoolQuery) -> QueryClause:
    """Create a nested bool clause."""
    return QueryClause("bool", bool_query)