from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from ..config import IMAGE_CALL, GatewaySettings
from ..decision.parser import first_image_data_uri
from ..llm.client_base import BackendClient
from ..llm_input.payload_codec import optional_str, require_fields
from ..prompts.prompt_builder import build_cartoon_parts
from .base import BaseAction
from .registry import register_action

logger = logging.getLogger(__name__)


@register_action("generate_cartoon")
class CartoonAction(BaseAction):
    """
    Restyle the pet photo. Returns the first generated image as a PNG data
    URI, or None when the backend produced no image or failed.
    """

    @property
    def name(self) -> str:
        return "generate_cartoon"

    def run(
        self, payload: Dict[str, Any], *, client: BackendClient, settings: GatewaySettings
    ) -> Optional[str]:
        require_fields(payload, ("imageBase64",), self.name)
        parts = build_cartoon_parts(payload["imageBase64"], optional_str(payload, "style"))

        try:
            result = client.invoke(model_id=settings.model_for(IMAGE_CALL), parts=parts)
        except Exception as e:
            logger.warning("Cartoon generation error: %s", e)
            return None

        return first_image_data_uri(result)
