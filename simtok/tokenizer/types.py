from pydantic import BaseModel, Field, ConfigDict
from typing import Dict, List, Optional, Set, Union

TokenResult = Union[List[str], Set[str]]


class QGramConfig(BaseModel):
    """Model for q-gram tokenizer configuration."""

    model_config = ConfigDict(frozen=True, extra="forbid", strict=True)

    q: int = Field(..., ge=1, description="Length of each q-gram")
    start_padding: str = Field(
        "", description="Prepended to the input before q-grams are taken"
    )
    end_padding: str = Field(
        "", description="Appended to the input before q-grams are taken"
    )


class PaddingConfig(BaseModel):
    """Model for symmetric q-gram padding, one character repeated q - 1 times."""

    model_config = ConfigDict(frozen=True, extra="forbid", strict=True)

    q: int = Field(..., ge=1, description="Length of each q-gram")
    padding: str = Field(
        ..., min_length=1, max_length=1, description="Single padding character"
    )


class BatchTokenizationResult(BaseModel):
    """Tokens produced for a batch of texts, slot for slot with the input."""

    model_config = ConfigDict(frozen=True)

    results: List[Optional[TokenResult]] = Field(
        ..., description="Tokens per input text; None marks a text that raised"
    )
    errors: Dict[int, str] = Field(
        default_factory=dict, description="Input index to error message"
    )

    @property
    def failed_indices(self) -> List[int]:
        """Indices of texts that raised, ascending."""
        return sorted(self.errors)

    @property
    def succeeded(self) -> int:
        return len(self.results) - len(self.errors)
