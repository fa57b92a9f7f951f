from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from .config import GatewaySettings
from .errors import ValidationFailure
from .llm.client_base import BackendClient
from .pipeline import dispatch

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResponseEnvelope:
    success: bool
    data: Any = None
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        if self.success:
            return {"success": True, "data": self.data}
        return {"success": False, "error": self.error}


def build_envelope(result: Any) -> Dict[str, Any]:
    return ResponseEnvelope(success=True, data=result).to_dict()


def error_envelope(message: str) -> Dict[str, Any]:
    return ResponseEnvelope(success=False, error=message).to_dict()


def handle_request(
    body: Any,
    *,
    client: BackendClient,
    settings: GatewaySettings,
) -> Tuple[int, Dict[str, Any]]:
    """
    Run one request and wrap the outcome.

    This is the only place where exceptions become responses: success is
    (200, {success: true, data}), anything raised is (500, {success: false, error}).
    """
    action = body.get("action") if isinstance(body, dict) else None
    try:
        if not isinstance(body, dict):
            raise ValidationFailure("Request body must be a JSON object")
        result = dispatch(action, body.get("payload"), client=client, settings=settings)
    except Exception as e:
        logger.exception("Error handling action %r", action)
        return 500, error_envelope(str(e))

    return 200, build_envelope(result)
