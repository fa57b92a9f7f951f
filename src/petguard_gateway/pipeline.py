from __future__ import annotations

from typing import Any, Dict

from .actions.registry import get_action, load_builtin_actions
from .config import GatewaySettings
from .errors import UnknownAction
from .llm.client_base import BackendClient


def dispatch(
    action: Any,
    payload: Dict[str, Any],
    *,
    client: BackendClient,
    settings: GatewaySettings,
) -> Any:
    """
    Select exactly one pipeline for `action` and run it.

      action -> pipeline -> prompt parts -> backend -> normalized result

    Raises UnknownAction for any name without a registered pipeline.
    """
    load_builtin_actions()

    action_cls = get_action(action) if isinstance(action, str) else None
    if action_cls is None:
        raise UnknownAction(action)

    return action_cls().run(payload, client=client, settings=settings)
