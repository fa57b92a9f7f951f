from __future__ import annotations

from typing import Any, Dict

from ..config import TEXT_CALL, GatewaySettings
from ..decision.parser import text_or_default
from ..llm.client_base import BackendClient
from ..llm_input.payload_codec import optional_str, require_fields
from ..prompts.prompt_builder import HEALTH_SYSTEM_INSTRUCTION, build_health_parts
from .base import BaseAction
from .registry import register_action

NO_ANALYSIS_TEXT = "Sorry, I could not generate an analysis at this time."


@register_action("analyze_health")
class HealthAnalysisAction(BaseAction):
    @property
    def name(self) -> str:
        return "analyze_health"

    def run(self, payload: Dict[str, Any], *, client: BackendClient, settings: GatewaySettings) -> str:
        require_fields(payload, ("symptoms", "bodyPart"), self.name)

        parts = build_health_parts(
            symptoms=payload["symptoms"],
            body_part=payload["bodyPart"],
            current_image=optional_str(payload, "currentImageBase64"),
            baseline_image=optional_str(payload, "baselineImageBase64"),
        )

        # Backend failures propagate to the envelope.
        result = client.invoke(
            model_id=settings.model_for(TEXT_CALL),
            parts=parts,
            system_instruction=HEALTH_SYSTEM_INSTRUCTION,
        )
        return text_or_default(result, NO_ANALYSIS_TEXT)
