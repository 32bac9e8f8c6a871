"""
Transform Registry

Name -> transform lookup. Registries are plain objects handed to whoever
needs them; create_default_registry() builds a fresh one each call.
"""

from typing import Dict, Iterator, List, Tuple
from .transformers import Reverse, TextTransform, Uppercase
from .validators import validate_transform_name
import logging

logger = logging.getLogger(__name__)


class UnknownTransformError(KeyError):
    """Lookup of a name nothing was registered under"""

    def __init__(self, name: str, available: List[str]):
        self.name = name
        self.available = available
        super().__init__(f"Unknown transform: {name} (available: {available})")

    def __str__(self) -> str:
        return self.args[0]


class TransformRegistry:
    """Registry of text transforms"""

    def __init__(self):
        self._transforms: Dict[str, TextTransform] = {}

    def register(self, name: str, transform: TextTransform, replace: bool = False):
        """Register a transform under name; refuses to shadow unless replace=True"""
        key = validate_transform_name(name)
        if not callable(getattr(transform, "apply", None)):
            raise TypeError(f"Transform '{key}' has no callable apply()")
        if key in self._transforms and not replace:
            raise ValueError(f"Transform '{key}' is already registered")

        self._transforms[key] = transform
        logger.debug(f"Registered transform '{key}': {transform!r}")
        return transform

    def get(self, name: str) -> TextTransform:
        key = validate_transform_name(name)
        try:
            return self._transforms[key]
        except KeyError:
            raise UnknownTransformError(key, self.names()) from None

    def names(self) -> List[str]:
        return sorted(self._transforms)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.strip().lower() in self._transforms

    def __len__(self) -> int:
        return len(self._transforms)

    def __iter__(self) -> Iterator[Tuple[str, TextTransform]]:
        return iter(list(self._transforms.items()))


def create_default_registry() -> TransformRegistry:
    """Create registry with built-in transforms."""
    registry = TransformRegistry()
    registry.register(Reverse.name, Reverse())
    registry.register(Uppercase.name, Uppercase())
    return registry
