"""Argument types of the search tool."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class HighlightOptions:
    """Highlighting configuration of a search."""

    enabled: bool = False
    fields: list[str] = field(default_factory=list)
    limit: int = 0
    limit_per_field: int = 0
    limit_words: int = 0
    around: int = 0
    start_tag: str = ""
    end_tag: str = ""
    number_of_fragments: int = 0


@dataclass
class FuzzyOptions:
    """Fuzzy search configuration."""

    enabled: bool = False
    distance: int = 0
    preserve: int = 0
    layouts: list[str] = field(default_factory=list)


@dataclass
class SearchArgs:
    """Arguments of the search tool.

    ``highlight`` and ``fuzzy`` may be given as plain mappings, as they
    arrive from decoded JSON; they are turned into their option types.
    """

    query: str = ""
    table: str = ""
    cluster: str = ""

    bool_query: Any = None

    limit: int = 0
    offset: int = 0

    fields: list[str] = field(default_factory=list)

    ranker: str = ""
    match_mode: str = ""
    max_matches: int = 0
    cutoff: int = 0
    max_query_time: int = 0
    field_weights: dict[str, int] = field(default_factory=dict)
    not_terms_only_allowed: int = 0
    boolean_simplify: int = 0
    accurate_aggregation: int = 0
    rand_seed: int = 0
    comment: str = ""
    agent_query_timeout: int = 0
    retry_count: int = 0
    retry_delay: int = 0
    morphology: str = ""
    token_filter: str = ""
    max_predicted_time: int = 0

    order_by: list[str] = field(default_factory=list)
    group_by: list[str] = field(default_factory=list)
    group_sort: str = ""

    highlight: HighlightOptions | None = None
    fuzzy: FuzzyOptions | None = None

    where: list[str] = field(default_factory=list)

    use_http: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.highlight, dict):
            self.highlight = HighlightOptions(**self.highlight)
        if isinstance(self.fuzzy, dict):
            self.fuzzy = FuzzyOptions(**self.fuzzy)