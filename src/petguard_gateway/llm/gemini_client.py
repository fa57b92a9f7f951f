from __future__ import annotations

import base64
import binascii
import logging
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Sequence

import httpx
from google import genai
from google.genai import errors, types

from ..errors import BackendCallFailure
from .client_base import BackendClient, BackendResult, ContentPart, InlineImage, TextPart

logger = logging.getLogger(__name__)


def _to_sdk_part(part: ContentPart) -> types.Part:
    if isinstance(part, TextPart):
        return types.Part.from_text(text=part.text)
    try:
        raw = base64.b64decode(part.data, validate=True)
    except (binascii.Error, ValueError) as e:
        raise BackendCallFailure(f"Image data is not valid base64: {e}") from e
    return types.Part.from_bytes(data=raw, mime_type=part.mime_type)


def _response_parts(response: Any) -> Iterable[Any]:
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return []
    content = getattr(candidates[0], "content", None)
    return getattr(content, "parts", None) or []


@dataclass
class GeminiBackendClient(BackendClient):
    """
    Google Gemini client implementation (google-genai SDK).

    The SDK client is created once and reused; it only holds the credential.
    An empty API key is accepted here and reported by the first call.
    """
    api_key: str = ""
    timeout_ms: Optional[int] = None
    model_name: str = "gemini"

    def __post_init__(self):
        self._client: Optional[genai.Client] = None
        if not self.api_key:
            logger.warning("GEMINI_API_KEY is empty; backend calls will fail.")
            return

        http_options = types.HttpOptions(timeout=self.timeout_ms) if self.timeout_ms else None
        self._client = genai.Client(api_key=self.api_key, http_options=http_options)

    def invoke(
        self,
        *,
        model_id: str,
        parts: Sequence[ContentPart],
        system_instruction: Optional[str] = None,
    ) -> BackendResult:
        if self._client is None:
            raise BackendCallFailure("Gemini API key is not configured.")

        sdk_parts = [_to_sdk_part(p) for p in parts]
        config = (
            types.GenerateContentConfig(system_instruction=system_instruction)
            if system_instruction
            else None
        )

        logger.debug("Calling %s with %d part(s)", model_id, len(sdk_parts))
        try:
            response = self._client.models.generate_content(
                model=model_id,
                contents=[types.Content(role="user", parts=sdk_parts)],
                config=config,
            )
        except (errors.APIError, httpx.HTTPError) as e:
            raise BackendCallFailure(f"Gemini call to {model_id} failed: {e}") from e

        texts: List[str] = []
        images: List[InlineImage] = []
        for part in _response_parts(response):
            inline = getattr(part, "inline_data", None)
            if inline is not None and inline.data:
                data = inline.data
                if isinstance(data, bytes):
                    data = base64.b64encode(data).decode("ascii")
                images.append(InlineImage(mime_type=inline.mime_type or "image/png", data=data))
            elif getattr(part, "text", None) and not getattr(part, "thought", False):
                texts.append(part.text)

        return BackendResult(
            text="".join(texts) or None,
            image_parts=images,
            model_name=model_id,
        )
