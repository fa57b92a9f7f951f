from __future__ import annotations

from typing import Any, Dict

from ..config import TEXT_CALL, GatewaySettings
from ..decision.parser import parse_structured_output
from ..llm.client_base import BackendClient
from ..llm_input.payload_codec import require_fields
from ..prompts.prompt_builder import build_personality_parts
from .base import BaseAction
from .registry import register_action

FALLBACK_PERSONALITY: Dict[str, Any] = {
    "tags": ["Mystery", "Cute", "Unknown"],
    "description": "A mysterious and lovely friend.",
}


@register_action("generate_personality")
class PersonalityAction(BaseAction):
    @property
    def name(self) -> str:
        return "generate_personality"

    def run(
        self, payload: Dict[str, Any], *, client: BackendClient, settings: GatewaySettings
    ) -> Dict[str, Any]:
        require_fields(payload, ("imageBase64",), self.name)

        result = client.invoke(
            model_id=settings.model_for(TEXT_CALL),
            parts=build_personality_parts(payload["imageBase64"]),
        )
        return parse_structured_output(result.text or "{}", FALLBACK_PERSONALITY)
