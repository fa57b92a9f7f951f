from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Union

from .client_base import BackendClient, BackendResult, ContentPart, InlineImage, TextPart


@dataclass(frozen=True)
class RecordedCall:
    model_id: str
    parts: List[ContentPart]
    system_instruction: Optional[str] = None

    @property
    def text(self) -> str:
        return "\n".join(p.text for p in self.parts if isinstance(p, TextPart))

    @property
    def images(self) -> List[InlineImage]:
        return [p for p in self.parts if isinstance(p, InlineImage)]


def _canned_result(parts: Sequence[ContentPart], model_name: str) -> BackendResult:
    """
    Offline stand-in for the real backend, keyed on the prompt wording:
      - personality / card metadata prompts get fenced JSON
      - image transformation prompts get the first input image echoed back
      - anything else gets a short structured analysis
    """
    prompt = "\n".join(p.text for p in parts if isinstance(p, TextPart))
    images = [p for p in parts if isinstance(p, InlineImage)]

    if "personality profile" in prompt:
        body = {"tags": ["Curious", "Cuddly", "Speedster"], "description": "A tiny explorer with a big heart."}
        return BackendResult(text=f"```json\n{json.dumps(body)}\n```", model_name=model_name)

    if "collectible card metadata" in prompt:
        body = {
            "name": "Mock Card",
            "description": "Generated offline.",
            "rarity": "Rare",
            "tags": ["offline", "mock"],
        }
        return BackendResult(text=json.dumps(body), model_name=model_name)

    if prompt.startswith("Turn this image into"):
        echoed = [InlineImage(mime_type="image/png", data=images[0].data)] if images else []
        return BackendResult(text=None, image_parts=echoed, model_name=model_name)

    text = (
        "**Observation**: Mock analysis based on "
        f"{len(images)} image(s) and the described symptoms.\n"
        "**Potential Causes**: Unknown (offline backend).\n"
        "**Recommendation**: Monitor for 24h.\n\n"
        "Disclaimer: I am an AI, not a veterinarian. This analysis is for informational "
        "purposes only and does not replace professional veterinary advice."
    )
    return BackendResult(text=text, model_name=model_name)


@dataclass
class MockBackendClient(BackendClient):
    """
    Backend double that records every call.

    Queued `scripted` outcomes are replayed in order (an Exception instance is
    raised instead of returned); once the queue is empty a canned result is
    synthesized from the prompt.
    """
    model_name: str = "mock-backend"
    scripted: List[Union[BackendResult, Exception]] = field(default_factory=list)
    calls: List[RecordedCall] = field(default_factory=list)

    def invoke(
        self,
        *,
        model_id: str,
        parts: Sequence[ContentPart],
        system_instruction: Optional[str] = None,
    ) -> BackendResult:
        self.calls.append(
            RecordedCall(model_id=model_id, parts=list(parts), system_instruction=system_instruction)
        )

        if self.scripted:
            outcome = self.scripted.pop(0)
            if isinstance(outcome, Exception):
                raise outcome
            return outcome

        return _canned_result(parts, self.model_name)
