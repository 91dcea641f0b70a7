# keyword_grouper/modules/grouping/models.py
"""
Data model of the grouping engine.

KeywordEntry is created by the parser and never mutated afterwards.
A group is a plain list of entries sorted by value, highest first.
ClusterResult is built once per run and only read by callers.
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class KeywordEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    keyword: str = Field(min_length=1)
    value: int


Group = List[KeywordEntry]


class ParsedLine(BaseModel):
    """Outcome of parsing one input line: a valid entry or a skip with its reason."""

    model_config = ConfigDict(frozen=True)

    line_number: int
    status: Literal["ok", "skipped"]
    entry: Optional[KeywordEntry] = None
    reason: Optional[Literal["empty", "missing_value", "invalid_value", "invalid_keyword"]] = None

    @property
    def ok(self) -> bool:
        return self.status == "ok"


class ClusterResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    groups: List[Group] = Field(default_factory=list)
    total_entries: int = 0
    group_count: int = 0
    merged_entry_count: int = 0

    @classmethod
    def from_groups(cls, groups: List[Group]) -> "ClusterResult":
        # merged = tutti i membri dei gruppi con piu' di un elemento
        return cls(
            groups=groups,
            total_entries=sum(len(g) for g in groups),
            group_count=len(groups),
            merged_entry_count=sum(len(g) for g in groups if len(g) > 1),
        )

    @property
    def is_empty(self) -> bool:
        return self.total_entries == 0
