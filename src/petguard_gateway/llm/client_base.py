from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Protocol, Sequence, Union


@dataclass(frozen=True)
class TextPart:
    text: str


@dataclass(frozen=True)
class InlineImage:
    """
    An image embedded directly in a request or response.

    `data` is base64 text (no data-URI prefix).
    """
    mime_type: str
    data: str


ContentPart = Union[TextPart, InlineImage]


@dataclass(frozen=True)
class BackendResult:
    """
    Standard result returned by any backend client implementation.
    """
    text: Optional[str] = None
    image_parts: List[InlineImage] = field(default_factory=list)
    model_name: str = ""


class BackendClient(Protocol):
    """
    Protocol / interface for generative backends.

    A client takes a model identifier, an optional system instruction and an
    ordered sequence of content parts, and returns text and/or inline images.
    Parts are consumed in the order given.
    """

    def invoke(
        self,
        *,
        model_id: str,
        parts: Sequence[ContentPart],
        system_instruction: Optional[str] = None,
    ) -> BackendResult:
        ...
