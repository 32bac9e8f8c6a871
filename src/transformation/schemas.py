"""
Transformation Layer Schemas

Request/result models for single transforms and the default frame schema
for batch runs.
"""

import polars as pl
from pydantic import BaseModel, Field, StrictStr, field_validator

from .validators import validate_transform_name

# Default shape of a batch input frame
TEXT_FRAME_SCHEMA = pl.Schema(
    [
        ("text", pl.String()),
    ]
)


class TransformRequest(BaseModel):
    """A single text transform invocation"""

    transform: str = Field(..., description="Registered transform name")
    text: StrictStr = Field(..., description="Input text, never coerced")

    @field_validator("transform")
    @classmethod
    def normalize_transform(cls, v):
        """Strip and lower-case the transform name, reject empty names"""
        return validate_transform_name(v)


class TransformResult(BaseModel):
    """Outcome of a single text transform"""

    transform: str = Field(..., description="Transform that produced the output")
    input_text: str = Field(..., description="Text passed in")
    output_text: str = Field(..., description="Text produced")
    input_length: int = Field(..., ge=0)
    output_length: int = Field(..., ge=0)

    @classmethod
    def from_texts(cls, transform: str, input_text: str, output_text: str):
        return cls(
            transform=transform,
            input_text=input_text,
            output_text=output_text,
            input_length=len(input_text),
            output_length=len(output_text),
        )
