"""
Input validation for grouping requests.
"""

import math

from keyword_grouper.modules.grouping import GROUPING_MODES


def validate_threshold(percent) -> float:
    """
    Validates a similarity threshold given as a percentage.

    Args:
        percent: Threshold in (0, 100], as sent by the slider.

    Returns:
        The threshold as a fraction in (0, 1].

    Raises:
        ValueError: If the value is not a number or is out of range.
    """
    if isinstance(percent, bool) or not isinstance(percent, (int, float)):
        raise ValueError("Threshold must be a number between 0 and 100.")

    if math.isnan(percent) or percent <= 0 or percent > 100:
        raise ValueError(f"Threshold must be in (0, 100], got {percent}.")

    return percent / 100


def validate_input_text(text: str, max_chars: int) -> str:
    """
    Checks the raw keyword text. Blank text is allowed (it yields an empty result).

    Raises:
        ValueError: If the text is not a string or exceeds `max_chars`.
    """
    if text is None:
        return ""
    if not isinstance(text, str):
        raise ValueError("Text must be a string.")
    if len(text) > max_chars:
        raise ValueError(f"Input too long ({len(text)} chars, max {max_chars}).")
    return text


def validate_mode(mode: str) -> str:
    if mode not in GROUPING_MODES:
        raise ValueError(
            f"Invalid grouping mode '{mode}'. Allowed: {', '.join(GROUPING_MODES)}."
        )
    return mode
