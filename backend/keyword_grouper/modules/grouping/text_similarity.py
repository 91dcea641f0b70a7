# keyword_grouper/modules/grouping/text_similarity.py
"""
Case-insensitive Levenshtein distance and the similarity score derived from it.

similarity = (max_len - distance) / max_len, 1.0 for two empty strings.
The distance uses the single-row recurrence, with each row computed as
numpy vector operations over the longer string.
"""

import numpy as np


def _codepoints(text: str) -> np.ndarray:
    return np.frombuffer(text.encode("utf-32-le"), dtype=np.uint32)


def edit_distance(a: str, b: str) -> int:
    """Levenshtein distance between lower-cased copies of `a` and `b`."""
    a = a.lower()
    b = b.lower()
    if len(a) < len(b):
        a, b = b, a
    if not b:
        return len(a)
    if a == b:
        return 0

    cols = _codepoints(a)
    offsets = np.arange(len(a) + 1, dtype=np.int64)
    row = offsets.copy()
    candidate = np.empty_like(row)

    for i, char in enumerate(_codepoints(b), start=1):
        cost = (cols != char).astype(np.int64)
        candidate[0] = i
        # deletion / substitution from the previous row
        np.minimum(row[1:] + 1, row[:-1] + cost, out=candidate[1:])
        # insertion: row[j] = min(candidate[j], row[j-1] + 1) as a prefix minimum
        row = np.minimum.accumulate(candidate - offsets) + offsets

    return int(row[-1])


def similarity(a: str, b: str) -> float:
    """Similarity in [0, 1] between two already-normalized strings."""
    max_len = max(len(a), len(b))
    if max_len == 0:
        return 1.0
    score = (max_len - edit_distance(a, b)) / max_len
    return max(0.0, score)


def similarity_upper_bound(len_a: int, len_b: int) -> float:
    """
    Best similarity two strings of these lengths can reach: the distance is
    never below the length difference.
    """
    max_len = max(len_a, len_b)
    if max_len == 0:
        return 1.0
    return (max_len - abs(len_a - len_b)) / max_len
