"""Field parser registry for the workout-parameter normalizer."""
from typing import Dict, Type
from .base import BaseFieldParser

_PARSER_REGISTRY: Dict[str, Type[BaseFieldParser]] = {}


def register_parser(parser_class: Type[BaseFieldParser]) -> None:
    """Register a field parser class.

    Raises:
        ValueError: If a parser is already registered under this name.
    """
    name = parser_class.parser_name()
    if name in _PARSER_REGISTRY:
        raise ValueError(f"Parser already registered for '{name}'")
    _PARSER_REGISTRY[name] = parser_class


def get_parser(name: str) -> BaseFieldParser:
    """Get an instantiated parser for the given name.

    Raises:
        KeyError: If no parser is registered under the name.
    """
    cls = _PARSER_REGISTRY[name]
    return cls()


def registered_parsers() -> Dict[str, Type[BaseFieldParser]]:
    return dict(_PARSER_REGISTRY)


__all__ = [
    "BaseFieldParser",
    "register_parser",
    "get_parser",
    "registered_parsers",
]

# Auto-register parsers on import
from . import pace_parser  # noqa: F401,E402
from . import duration_parser  # noqa: F401,E402
from . import rest_parser  # noqa: F401,E402
