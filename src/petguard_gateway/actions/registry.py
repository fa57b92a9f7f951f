import logging
from typing import Dict, List, Optional, Type

from .base import BaseAction

logger = logging.getLogger(__name__)

_REGISTRY: Dict[str, Type[BaseAction]] = {}


def register_action(name: str):
    """Decorator to register an action class."""
    def decorator(cls: Type[BaseAction]):
        if name in _REGISTRY and _REGISTRY[name] is not cls:
            logger.warning("Action '%s' re-registered by %s", name, cls.__name__)
        _REGISTRY[name] = cls
        return cls
    return decorator


def get_action(name: str) -> Optional[Type[BaseAction]]:
    """Return the action class for a given name."""
    return _REGISTRY.get(name)


def list_actions() -> List[str]:
    """Return a list of registered action names."""
    return sorted(_REGISTRY.keys())


def load_builtin_actions():
    """Import the built-in pipelines so their decorators run."""
    from . import cartoon, collectible_card, health, personality  # noqa: F401
