"""
Text Transformers - Transform Layer

Pure text-to-text transforms. Each transform is a small class exposing
apply(text) -> text; Uppercase additionally takes part in checkpoint/restore
through before_checkpoint/after_restore hooks.
"""

from abc import ABC, abstractmethod
import polars as pl
from typing import Any, Callable, Optional, Protocol, runtime_checkable
from .validators import validate_text_frame, validate_text_input
import logging

logger = logging.getLogger(__name__)


@runtime_checkable
class TextTransform(Protocol):
    """Anything with a name and a text-in/text-out apply()"""

    name: str

    def apply(self, text: str) -> str: ...


class StringTransform(ABC):
    """Base class for the built-in transforms: checks input, then delegates"""

    name = "transform"

    def apply(self, text: str) -> str:
        return self._transform(validate_text_input(text, self.name))

    def __call__(self, text: str) -> str:
        return self.apply(text)

    @abstractmethod
    def _transform(self, text: str) -> str: ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class Reverse(StringTransform):
    """Characters in reverse order; length is preserved"""

    name = "reverse"

    def _transform(self, text: str) -> str:
        return text[::-1]


class Uppercase(StringTransform):
    """
    Upper-cases text with Python's default Unicode case mapping

    Output length can differ from input length ("ß" -> "SS"). The instance is
    checkpoint-aware but does not register itself; pass it to
    register_component() to attach it to a coordinator.
    """

    name = "uppercase"

    def _transform(self, text: str) -> str:
        return text.upper()

    def before_checkpoint(self, context: Any) -> None:
        logger.info("Before checkpoint")

    def after_restore(self, context: Any) -> None:
        logger.info("After restore")


def reverse_text(text: str) -> str:
    return Reverse().apply(text)


def uppercase_text(text: str) -> str:
    return Uppercase().apply(text)


def apply_to_column(
    df: pl.DataFrame,
    transform: Callable[[str], str],
    column: str = "text",
    output_column: Optional[str] = None,
) -> pl.DataFrame:
    """
    Apply a text transform to every value of a String column

    Args:
        df: Input DataFrame
        transform: Transform instance or plain str -> str callable
        column: Source column
        output_column: Target column, overwrites the source when None

    Returns:
        pl.DataFrame: Input frame with the transformed column; nulls stay null
    """
    validate_text_frame(df, column)
    func = getattr(transform, "apply", transform)
    target = output_column or column

    logger.info(f"Applying {getattr(transform, 'name', func)} to {df.height} rows")

    try:
        return df.with_columns(
            pl.col(column)
            .map_elements(func, return_dtype=pl.String(), skip_nulls=True)
            .alias(target)
        )
    except Exception as e:
        logger.error(f"❌ Error transforming column '{column}': {e}")
        raise
