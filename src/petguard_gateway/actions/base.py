from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict

from ..config import GatewaySettings
from ..llm.client_base import BackendClient


class BaseAction(ABC):
    @abstractmethod
    def run(self, payload: Dict[str, Any], *, client: BackendClient, settings: GatewaySettings) -> Any:
        """
        Validate `payload`, call the backend and return the normalized result.
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Return the action name clients send in the request envelope.
        """
        pass
