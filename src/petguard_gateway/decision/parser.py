from __future__ import annotations

import copy
import json
import logging
import re
from typing import Any, Dict, Optional

from ..errors import MalformedStructuredOutput
from ..llm.client_base import BackendResult, InlineImage

logger = logging.getLogger(__name__)

_FENCE_RE = re.compile(r"^\s*```(?:json)?[ \t]*\n?|\n?\s*```\s*$", re.IGNORECASE)


def strip_json_fence(text: str) -> str:
    """
    Remove a leading ```json (or bare ```) and trailing ``` delimiter,
    then trim whitespace.
    """
    return _FENCE_RE.sub("", text or "").strip()


def decode_json_object(text: str) -> Dict[str, Any]:
    cleaned = strip_json_fence(text)
    try:
        value = json.loads(cleaned)
    except (ValueError, RecursionError) as e:
        raise MalformedStructuredOutput(f"Backend output is not valid JSON: {e}") from e
    if not isinstance(value, dict):
        raise MalformedStructuredOutput(
            f"Backend output is JSON but not an object (got {type(value).__name__})"
        )
    return value


def parse_structured_output(text: Optional[str], fallback: Dict[str, Any]) -> Dict[str, Any]:
    """
    Parse backend text expected to hold a JSON object.

    If parsing fails for any reason, returns a copy of `fallback`.
    Never raises.
    """
    try:
        return decode_json_object(text or "")
    except MalformedStructuredOutput as e:
        logger.info("Using fallback for structured output: %s", e)
        return copy.deepcopy(fallback)


def text_or_default(result: BackendResult, default: str) -> str:
    return result.text or default


def _to_data_uri(image: InlineImage) -> str:
    return f"data:image/png;base64,{image.data}"


def first_image_data_uri(result: BackendResult) -> Optional[str]:
    for image in result.image_parts:
        return _to_data_uri(image)
    return None


def last_image_data_uri(result: BackendResult) -> Optional[str]:
    # Every inline image overwrites the previous one; the last one wins.
    best: Optional[str] = None
    for image in result.image_parts:
        best = _to_data_uri(image)
    return best
