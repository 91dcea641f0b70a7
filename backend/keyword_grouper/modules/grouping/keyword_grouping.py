# keyword_grouper/modules/grouping/keyword_grouping.py
import logging
from typing import List, Optional, Sequence, Tuple

import numpy as np
from sklearn.cluster import AgglomerativeClustering

from .models import ClusterResult, Group, KeywordEntry
from .normalizer import normalize_keyword
from .parser import parse_lines
from .text_similarity import similarity, similarity_upper_bound

logger = logging.getLogger(__name__)

GROUPING_MODES = ("anchor", "transitive")


class _Normalized:
    """Normalized keyword computed once per run."""

    __slots__ = ("text", "length", "length_stable")

    def __init__(self, keyword: str):
        self.text = normalize_keyword(keyword)
        self.length = len(self.text)
        # lower() can change the length of a few characters; the bound only holds without that
        self.length_stable = len(self.text.lower()) == self.length


def _matches(a: _Normalized, b: _Normalized, threshold: float, length_prefilter: bool) -> bool:
    if length_prefilter and a.length_stable and b.length_stable:
        if similarity_upper_bound(a.length, b.length) < threshold:
            return False
    return similarity(a.text, b.text) >= threshold


def _anchor_groups(
    normalized: List[_Normalized], threshold: float, length_prefilter: bool
) -> List[List[int]]:
    # ogni voce viene confrontata solo con l'ancora del gruppo, non con gli altri membri
    used = set()
    groups = []
    for i in range(len(normalized)):
        if i in used:
            continue
        members = [i]
        used.add(i)
        anchor = normalized[i]
        for j in range(len(normalized)):
            if j in used:
                continue
            if _matches(anchor, normalized[j], threshold, length_prefilter):
                members.append(j)
                used.add(j)
        groups.append(members)
    return groups


def _transitive_groups(
    normalized: List[_Normalized], threshold: float, length_prefilter: bool
) -> List[List[int]]:
    """
    Single-linkage clustering: any chain of pairs at or above the threshold
    ends up in one group. Groups are returned in order of their first member.
    """
    n = len(normalized)
    if n < 2:
        return [[i] for i in range(n)]

    # distanza binaria: 0 se simili, 1 altrimenti; single linkage = componenti connesse
    distances = np.ones((n, n), dtype=np.float64)
    np.fill_diagonal(distances, 0.0)
    for i in range(n):
        for j in range(i + 1, n):
            if _matches(normalized[i], normalized[j], threshold, length_prefilter):
                distances[i, j] = distances[j, i] = 0.0

    model = AgglomerativeClustering(
        n_clusters=None,
        metric="precomputed",
        linkage="single",
        distance_threshold=0.5,
    ).fit(distances)

    clusters = {}
    for idx, label in enumerate(model.labels_):
        clusters.setdefault(int(label), []).append(idx)
    return sorted(clusters.values(), key=lambda members: members[0])


def group_keywords(
    entries: Sequence[KeywordEntry],
    threshold: float,
    mode: str = "anchor",
    length_prefilter: bool = True,
) -> ClusterResult:
    """
    Greedy grouping of keyword entries by normalized similarity.

    entries: parsed entries, in input order (the order decides which entry anchors a group)
    threshold: similarity cutoff in (0, 1]
    mode: "anchor" compares each entry with the group's anchor only;
          "transitive" merges every chain of similar pairs

    Members of a group are sorted by value (highest first), groups by the
    value of their first member. Both sorts are stable.
    """
    if not 0 < threshold <= 1:
        raise ValueError(f"Similarity threshold must be in (0, 1], got {threshold}")
    if mode not in GROUPING_MODES:
        raise ValueError(f"Unknown grouping mode '{mode}'. Use one of: {', '.join(GROUPING_MODES)}")

    if not entries:
        return ClusterResult()

    normalized = [_Normalized(e.keyword) for e in entries]
    if mode == "anchor":
        index_groups = _anchor_groups(normalized, threshold, length_prefilter)
    else:
        index_groups = _transitive_groups(normalized, threshold, length_prefilter)

    groups: List[Group] = []
    for members in index_groups:
        group = [entries[idx] for idx in members]
        group.sort(key=lambda e: e.value, reverse=True)
        groups.append(group)
    groups.sort(key=lambda g: g[0].value, reverse=True)

    result = ClusterResult.from_groups(groups)
    logger.info(
        f"Grouped {result.total_entries} keywords into {result.group_count} groups "
        f"({result.merged_entry_count} merged, threshold={threshold}, mode={mode})"
    )
    return result


def cluster_text_report(
    text: str,
    threshold: float,
    mode: str = "anchor",
    length_prefilter: bool = True,
) -> Tuple[Optional[ClusterResult], int]:
    """
    Parse raw `keyword<TAB>value` text once and group it.
    Returns (result, number of skipped lines); result is None when there is
    nothing to group (blank text or no valid line).
    """
    if not text or not text.strip():
        return None, 0

    parsed = parse_lines(text)
    entries = [p.entry for p in parsed if p.ok]
    skipped = len(parsed) - len(entries)
    if not entries:
        logger.info(f"No valid keyword lines in input ({skipped} skipped)")
        return None, skipped

    result = group_keywords(entries, threshold, mode=mode, length_prefilter=length_prefilter)
    return result, skipped


def cluster_text(
    text: str,
    threshold: float,
    mode: str = "anchor",
    length_prefilter: bool = True,
) -> Optional[ClusterResult]:
    """Like cluster_text_report, without the skipped-line count."""
    result, _ = cluster_text_report(text, threshold, mode=mode, length_prefilter=length_prefilter)
    return result
