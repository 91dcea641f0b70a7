"""
Keyword Grouping Module
Parses `keyword<TAB>value` lines, normalizes keywords, scores similarity
and groups near-duplicates by demand.
"""

from .models import KeywordEntry, ParsedLine, ClusterResult, Group
from .parser import parse_int, parse_line, parse_lines, parse_keywords
from .normalizer import normalize_keyword, NORMALIZATION_STEPS
from .text_similarity import edit_distance, similarity
from .keyword_grouping import group_keywords, cluster_text, cluster_text_report, GROUPING_MODES
from .formatter import (
    format_groups,
    to_csv,
    csv_from_text,
    preview_groups,
    summarize,
    CSV_HEADER,
)

__all__ = [
    # Model
    "KeywordEntry",
    "ParsedLine",
    "ClusterResult",
    "Group",

    # Parsing & normalization
    "parse_int",
    "parse_line",
    "parse_lines",
    "parse_keywords",
    "normalize_keyword",
    "NORMALIZATION_STEPS",

    # Scoring & grouping
    "edit_distance",
    "similarity",
    "group_keywords",
    "cluster_text",
    "cluster_text_report",
    "GROUPING_MODES",

    # Output
    "format_groups",
    "to_csv",
    "csv_from_text",
    "preview_groups",
    "summarize",
    "CSV_HEADER",
]
