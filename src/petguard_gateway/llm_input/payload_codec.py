from __future__ import annotations

import re
from typing import Any, Dict, Iterable, Optional

from ..errors import ValidationFailure
from ..llm.client_base import InlineImage

INBOUND_IMAGE_MIME = "image/jpeg"

_DATA_URI_PREFIX_RE = re.compile(r"^data:image/\w+;base64,")


def strip_data_uri(value: str) -> str:
    """
    Remove a leading `data:image/<subtype>;base64,` prefix.

    Bare base64 is returned unchanged, so applying this twice is a no-op.
    """
    return _DATA_URI_PREFIX_RE.sub("", value, count=1)


def image_part(value: str) -> InlineImage:
    return InlineImage(mime_type=INBOUND_IMAGE_MIME, data=strip_data_uri(value))


def require_fields(payload: Any, fields: Iterable[str], action: str) -> Dict[str, Any]:
    """
    Check that `payload` is an object carrying a non-empty string for each
    of `fields`. Returns the payload for chaining.
    """
    if not isinstance(payload, dict):
        raise ValidationFailure(f"{action}: payload must be a JSON object")

    missing = [name for name in fields if not isinstance(payload.get(name), str) or not payload[name]]
    if missing:
        raise ValidationFailure(f"{action}: missing required field(s): {', '.join(missing)}")
    return payload


def optional_str(payload: Dict[str, Any], name: str) -> Optional[str]:
    value = payload.get(name)
    if isinstance(value, str) and value:
        return value
    return None
