"""Validation report model."""

from pydantic import BaseModel, Field, computed_field


class ValidationReport(BaseModel):
    """Result of a structural check over a generated calendar document.

    Findings are data: an invalid document is an expected outcome, not an
    exceptional one. Warnings never affect validity.
    """

    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)

    @computed_field
    @property
    def is_valid(self) -> bool:
        return not self.errors
