"""
JSON document parsing.

Input is always parsed from scratch with the standard library parser.
Non-standard constants (NaN, Infinity) are rejected so that accepted
documents are exactly the ones a strict JSON parser accepts.
"""

import json
import logging
from typing import Any

from .exceptions import ParseError

logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON constant: {name}")


def parse_document(text: str) -> Any:
    """
    Parse raw JSON text into a Python value.

    Raises:
        ParseError: If the text is not valid JSON. Line, column and offset
            are filled in when the parser reports them.
    """
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        logger.debug(f"JSON decode failed at {e.lineno}:{e.colno}: {e.msg}")
        raise ParseError(e.msg, line=e.lineno, column=e.colno, position=e.pos) from e
    except ValueError as e:
        raise ParseError(str(e)) from e
    except RecursionError as e:
        raise ParseError("Document is nested too deeply to parse") from e


def canonical_json(value: Any) -> str:
    """
    Canonical serialization used for value equality.

    Object keys are sorted so that two objects holding the same members in a
    different order compare equal; booleans and numbers stay distinct
    (`true` is not `1`).
    """
    return json.dumps(value, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def compact_json(value: Any) -> str:
    """Compact serialization used in node labels."""
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)
