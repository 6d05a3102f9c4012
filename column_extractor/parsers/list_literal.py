"""Recovery of list values serialized as bracketed string literals.

Cells often hold Python-style reprs such as "['Add', 'Stir']". These are
recovered by swapping single quotes for double quotes and parsing the
result as a JSON array. The substitution is naive: an apostrophe inside an
element (e.g. "['It's ok']") breaks the JSON and the cell is passed through
unchanged.
"""

import json
import logging
from typing import Any

from column_extractor.models.extraction import PassThrough, RecoveredList, RecoveredValue

logger = logging.getLogger(__name__)

# Space separators, line terminators and the BOM. str.strip() would miss the
# BOM and also drop the \x1c-\x1f and \x85 control characters.
TRIM_CHARS = (
    "\t\n\x0b\x0c\r \xa0\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006"
    "\u2007\u2008\u2009\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
)


def _reject_constant(name: str):
    # json.loads accepts NaN/Infinity/-Infinity; strict JSON does not
    raise ValueError(f"Invalid JSON constant: {name}")


def looks_like_list(value: Any) -> bool:
    """Return True if value is a string whose trimmed text is wrapped in [ ]."""
    if not isinstance(value, str):
        return False
    trimmed = value.strip(TRIM_CHARS)
    return trimmed.startswith("[") and trimmed.endswith("]")


def parse_list_literal(value: Any) -> RecoveredValue:
    """
    Recover a list from a cell value, or pass the value through.

    Args:
        value: A decoded cell (string, number, date, or "")

    Returns:
        RecoveredList if the cell is a bracketed literal that parses to a
        JSON array, otherwise PassThrough holding the original, untrimmed value.
        Never raises.
    """
    if not looks_like_list(value):
        return PassThrough(value)

    json_string = value.strip(TRIM_CHARS).replace("'", '"')
    try:
        parsed = json.loads(json_string, parse_constant=_reject_constant)
    except (ValueError, RecursionError):
        logger.debug("Not a list literal, passing through: %.80r", value)
        return PassThrough(value)

    if not isinstance(parsed, list):
        return PassThrough(value)
    return RecoveredList(tuple(parsed))
