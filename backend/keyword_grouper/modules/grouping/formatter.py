# keyword_grouper/modules/grouping/formatter.py
"""
Output shapes handed to the HTTP layer: text lines, CSV export, preview, stats.
"""

from typing import Dict, List

from .models import ClusterResult, Group

MEMBER_SEPARATOR = "\t\t"
FIELD_SEPARATOR = "\t"

CSV_HEADER = (
    "Mot-clé principal,Valeur principale,"
    "Mot-clé 2,Valeur 2,Mot-clé 3,Valeur 3,Mot-clé 4,Valeur 4"
)


def format_group(group: Group) -> str:
    return MEMBER_SEPARATOR.join(f"{e.keyword}{FIELD_SEPARATOR}{e.value}" for e in group)


def format_groups(groups: List[Group]) -> str:
    """One line per group: `kw<TAB>value<TAB><TAB>kw<TAB>value...`."""
    return "\n".join(format_group(g) for g in groups)


def _quote(keyword: str) -> str:
    return '"' + keyword.replace('"', '""') + '"'


def _csv_row(pairs: List[tuple], max_members: int) -> str:
    cells = []
    for keyword, value in pairs[:max_members]:
        cells.extend([_quote(keyword), value])
    # colonne vuote per i gruppi con meno di max_members voci
    cells.extend([""] * (2 * max_members - len(cells)))
    return ",".join(cells)


def to_csv(groups: List[Group], max_members: int = 4) -> str:
    """
    CSV export: one row per group, keyword cells quoted, rows padded to
    `max_members` keyword/value pairs and truncated past it.
    """
    lines = [CSV_HEADER]
    for group in groups:
        pairs = [(e.keyword, str(e.value)) for e in group]
        lines.append(_csv_row(pairs, max_members))
    return "\n".join(lines) + "\n"


def csv_from_text(result_text: str, max_members: int = 4) -> str:
    """CSV export built from the text result, as produced by `format_groups`."""
    lines = [CSV_HEADER]
    for line in result_text.split("\n"):
        if not line.strip():
            continue
        pairs = []
        for item in line.split(MEMBER_SEPARATOR):
            parts = item.split(FIELD_SEPARATOR)
            pairs.append((parts[0], parts[1] if len(parts) > 1 else ""))
        lines.append(_csv_row(pairs, max_members))
    return "\n".join(lines) + "\n"


def preview_groups(groups: List[Group]) -> List[Group]:
    """Only the groups that merged more than one keyword."""
    return [g for g in groups if len(g) > 1]


def summarize(result: ClusterResult) -> Dict[str, int]:
    return {
        "total": result.total_entries,
        "groups": result.group_count,
        "grouped": result.merged_entry_count,
    }
