# keyword_grouper/modules/grouping/parser.py
"""
Parser for `keyword<TAB>value` lines.

Every line yields a ParsedLine; malformed lines are tagged as skipped
and never raise.
"""

import logging
import re
from typing import List, Optional

from pydantic import ValidationError

from .models import KeywordEntry, ParsedLine

logger = logging.getLogger(__name__)

# segno opzionale + cifre iniziali, il resto della stringa viene ignorato
_INT_PREFIX = re.compile(r"^[+-]?[0-9]+")

# values outside a signed 64-bit integer are treated as malformed
_INT_MIN = -(2 ** 63)
_INT_MAX = 2 ** 63 - 1


def parse_int(raw: str) -> Optional[int]:
    """
    Lenient base-10 integer parse: leading sign and digits are read,
    trailing characters are ignored ("12abc" -> 12, "1.5" -> 1).
    Returns None when no digits lead the string or the value overflows.
    """
    match = _INT_PREFIX.match(raw.strip())
    if not match:
        return None
    value = int(match.group(0))
    if value < _INT_MIN or value > _INT_MAX:
        return None
    return value


def parse_line(line: str, line_number: int = 0) -> ParsedLine:
    if not line.strip():
        return ParsedLine(line_number=line_number, status="skipped", reason="empty")

    parts = line.split("\t")
    if len(parts) < 2:
        return ParsedLine(line_number=line_number, status="skipped", reason="missing_value")

    keyword = parts[0].strip()
    value = parse_int(parts[1])
    if value is None:
        return ParsedLine(line_number=line_number, status="skipped", reason="invalid_value")
    if not keyword:
        # a tab-led line has no keyword to group on
        return ParsedLine(line_number=line_number, status="skipped", reason="missing_value")

    try:
        entry = KeywordEntry(keyword=keyword, value=value)
    except ValidationError:
        # e.g. a lone surrogate coming from a JSON escape
        return ParsedLine(line_number=line_number, status="skipped", reason="invalid_keyword")

    return ParsedLine(line_number=line_number, status="ok", entry=entry)


def parse_lines(text: str) -> List[ParsedLine]:
    """Parse every non-blank line of `text`, keeping skipped lines with their reason."""
    if not text:
        return []

    parsed = []
    for number, line in enumerate(text.split("\n"), start=1):
        if not line.strip():
            continue
        result = parse_line(line, number)
        if not result.ok:
            logger.debug("Skipped line %d (%s): %r", number, result.reason, line[:80])
        parsed.append(result)
    return parsed


def parse_keywords(text: str) -> List[KeywordEntry]:
    """Valid entries of `text` in input order."""
    return [p.entry for p in parse_lines(text) if p.ok]
