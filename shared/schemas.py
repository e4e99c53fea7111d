"""
Pydantic schemas for splitter configuration.
"""

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from .errors import InvalidConfiguration


class SplitterConfig(BaseModel):
    """Validated, immutable settings for the semantic splitter."""

    model_config = ConfigDict(frozen=True, strict=True)

    similarity_threshold: float = Field(
        default=0.75,
        ge=0.0,
        le=1.0,
        description="Split when adjacent sentence similarity drops below this",
    )
    min_chunk_size_in_chars: int = Field(
        default=100, ge=0, description="No semantic split before this many chars"
    )
    max_chunk_size_in_chars: int = Field(
        default=300, description="Hard cap on chunk length (single sentences excepted)"
    )

    @model_validator(mode="after")
    def _check_bounds(self) -> "SplitterConfig":
        if self.max_chunk_size_in_chars <= self.min_chunk_size_in_chars:
            raise ValueError(
                "max_chunk_size_in_chars must be > min_chunk_size_in_chars"
            )
        return self


def build_splitter_config(**values) -> SplitterConfig:
    """
    Build a SplitterConfig, reporting violations as InvalidConfiguration.

    Example:
        >>> build_splitter_config(similarity_threshold=0.8).max_chunk_size_in_chars
        300
    """
    try:
        return SplitterConfig(**values)
    except ValidationError as e:
        raise InvalidConfiguration(f"Invalid splitter configuration: {e}") from e
