"""
Transform Pipeline - Orchestration Layer

Composes a transform registry with a checkpoint coordinator:
1. Registry: name -> transform lookup
2. Coordinator: checkpoint/restore notifications for checkpoint-aware transforms
3. Runs: single text or a DataFrame column
"""

import polars as pl
from typing import List, Optional
from ..transformation.registry import TransformRegistry, create_default_registry
from ..transformation.schemas import TransformRequest, TransformResult
from ..transformation.transformers import TextTransform, apply_to_column
from ..transformation.validators import validate_transform_name
from .checkpoint import CheckpointAware, CheckpointCoordinator, register_component
import logging

logger = logging.getLogger(__name__)


def checkpoint_aware_transforms(registry: TransformRegistry) -> List[TextTransform]:
    """Registered transforms that also implement the checkpoint hooks"""
    return [t for _, t in registry if isinstance(t, CheckpointAware)]


class TransformPipeline:
    """Registry lookups plus checkpoint wiring for the transforms it serves"""

    def __init__(
        self,
        registry: Optional[TransformRegistry] = None,
        coordinator: Optional[CheckpointCoordinator] = None,
    ):
        self.registry = registry if registry is not None else create_default_registry()
        self.coordinator = (
            coordinator if coordinator is not None else CheckpointCoordinator()
        )

        for transform in checkpoint_aware_transforms(self.registry):
            register_component(transform, self.coordinator)

        logger.info(
            f"✅ Pipeline ready with transforms {self.registry.names()}, "
            f"{len(self.coordinator.resources)} checkpoint resource(s)"
        )

    def run(self, name: str, text: str) -> TransformResult:
        """
        Apply one transform to one text

        Args:
            name: Registered transform name (case-insensitive)
            text: Input text

        Returns:
            TransformResult: Input, output and their lengths
        """
        request = TransformRequest(transform=name, text=text)
        transform = self.registry.get(request.transform)

        try:
            output = transform.apply(request.text)
        except Exception as e:
            logger.error(f"❌ Transform '{request.transform}' failed: {e}")
            raise

        logger.debug(f"{request.transform}: {len(request.text)} -> {len(output)} chars")
        return TransformResult.from_texts(request.transform, request.text, output)

    def run_batch(
        self,
        df: pl.DataFrame,
        name: str,
        column: str = "text",
        output_column: Optional[str] = None,
    ) -> pl.DataFrame:
        """Apply a transform to a String column, writing {column}_{name} by default"""
        key = validate_transform_name(name)
        transform = self.registry.get(key)
        target = output_column or f"{column}_{key}"
        return apply_to_column(df, transform, column=column, output_column=target)

    def checkpoint(self) -> None:
        self.coordinator.checkpoint()

    def restore(self) -> None:
        self.coordinator.restore()

    def get_status(self) -> dict:
        return {
            "transforms": self.registry.names(),
            "checkpoint_resources": [repr(r) for r in self.coordinator.resources],
            "lifecycle_state": self.coordinator.state.value,
        }
