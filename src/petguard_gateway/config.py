from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Dict, Optional

from dotenv import load_dotenv

TEXT_CALL = "text"
IMAGE_CALL = "image"

DEFAULT_TEXT_MODEL = "gemini-2.5-flash"
DEFAULT_IMAGE_MODEL = "gemini-2.5-flash-image"


def _optional_int(raw: Optional[str]) -> Optional[int]:
    if raw is None or not raw.strip():
        return None
    return int(raw)


@dataclass(frozen=True)
class GatewaySettings:
    """
    Process-wide configuration, built once before serving begins.

    `models` maps a call kind ("text" for prompt/JSON calls, "image" for
    image-generating calls) to the backend model identifier.
    """
    api_key: str = ""
    models: Dict[str, str] = field(
        default_factory=lambda: {TEXT_CALL: DEFAULT_TEXT_MODEL, IMAGE_CALL: DEFAULT_IMAGE_MODEL}
    )
    request_timeout_ms: Optional[int] = None
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "GatewaySettings":
        load_dotenv()

        # A missing key is passed through; the first backend call reports it.
        return cls(
            api_key=os.getenv("GEMINI_API_KEY", ""),
            models={
                TEXT_CALL: os.getenv("PETGUARD_TEXT_MODEL", DEFAULT_TEXT_MODEL),
                IMAGE_CALL: os.getenv("PETGUARD_IMAGE_MODEL", DEFAULT_IMAGE_MODEL),
            },
            request_timeout_ms=_optional_int(os.getenv("PETGUARD_REQUEST_TIMEOUT_MS")),
            host=os.getenv("PETGUARD_HOST", "0.0.0.0"),
            port=int(os.getenv("PETGUARD_PORT", "8000")),
            log_level=os.getenv("PETGUARD_LOG_LEVEL", "INFO").upper(),
        )

    def model_for(self, kind: str) -> str:
        try:
            return self.models[kind]
        except KeyError:
            raise KeyError(f"No model configured for call kind '{kind}'") from None
