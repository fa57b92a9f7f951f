from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from ..config import IMAGE_CALL, TEXT_CALL, GatewaySettings
from ..decision.parser import last_image_data_uri, parse_structured_output
from ..llm.client_base import BackendClient
from ..llm_input.payload_codec import optional_str, require_fields
from ..prompts.prompt_builder import (
    DEFAULT_ART_THEME,
    build_card_art_parts,
    build_card_metadata_parts,
)
from .base import BaseAction
from .registry import register_action

logger = logging.getLogger(__name__)


def fallback_card_metadata(theme: str) -> Dict[str, Any]:
    return {
        "name": f"{theme} Card",
        "description": "A special card for your collection.",
        "rarity": "Common",
        "tags": [],
    }


@register_action("generate_collectible_card")
class CollectibleCardAction(BaseAction):
    """
    Two sequential backend calls:
      1) card metadata (JSON, recovered with a fallback on bad output)
      2) card art from the source photo

    If the art call fails the whole card is dropped (returns None), even
    though the metadata is already in hand.
    """

    @property
    def name(self) -> str:
        return "generate_collectible_card"

    def run(
        self, payload: Dict[str, Any], *, client: BackendClient, settings: GatewaySettings
    ) -> Optional[Dict[str, Any]]:
        require_fields(payload, ("imageBase64", "species"), self.name)
        species = payload["species"]
        theme = optional_str(payload, "theme") or DEFAULT_ART_THEME

        metadata_result = client.invoke(
            model_id=settings.model_for(TEXT_CALL),
            parts=build_card_metadata_parts(species=species, theme=theme),
        )
        metadata = parse_structured_output(
            metadata_result.text or "{}", fallback_card_metadata(theme)
        )

        try:
            art_result = client.invoke(
                model_id=settings.model_for(IMAGE_CALL),
                parts=build_card_art_parts(image=payload["imageBase64"], theme=theme, species=species),
            )
        except Exception as e:
            logger.warning("Card image generation error: %s", e)
            return None

        return {
            "name": metadata.get("name"),
            "description": metadata.get("description"),
            "rarity": metadata.get("rarity"),
            "tags": metadata.get("tags") or [],
            "image": last_image_data_uri(art_result),
        }
