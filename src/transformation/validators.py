"""
Input Validators - Transform Layer

Precondition checks shared by the transforms, the registry and the batch path.
Violations raise immediately instead of falling back to a default.
"""

import polars as pl
from typing import Any
import logging

logger = logging.getLogger(__name__)


def validate_text_input(value: Any, transform_name: str = "transform") -> str:
    """
    Ensure a transform received text

    Args:
        value: Whatever the caller passed to apply()
        transform_name: Used in the error message

    Returns:
        str: The value unchanged, if it is a string
    """
    if not isinstance(value, str):
        raise TypeError(
            f"{transform_name} expects str input, got {type(value).__name__}"
        )
    return value


def validate_transform_name(name: Any) -> str:
    """Normalize a registry key: stripped, lower-case, non-empty."""
    if not isinstance(name, str):
        raise TypeError(f"Transform name must be str, got {type(name).__name__}")

    normalized = name.strip().lower()
    if not normalized:
        raise ValueError("Transform name must not be empty")
    return normalized


def validate_text_frame(df: pl.DataFrame, column: str) -> bool:
    """
    Validate a DataFrame can be fed to a text transform

    Args:
        df: Input DataFrame
        column: Column holding the text

    Returns:
        bool: True if valid, raises exception if invalid
    """
    if column not in df.columns:
        raise ValueError(f"Column '{column}' not found, available: {df.columns}")

    dtype = df.schema[column]
    if dtype != pl.String:
        raise TypeError(f"Column '{column}' must be String, got {dtype}")

    logger.debug(f"Text frame validation passed: {df.height} records")
    return True
