"""Data models for word and chain verification."""

from typing import List, Optional
from pydantic import BaseModel, Field


class ValidationError(BaseModel):
    """A single validation error."""
    code: str
    message: str
    word: Optional[str] = None
    position: Optional[int] = None  # index of the word in the chain
    cascade_level: int = 0  # 0=FATAL, 1=CRITICAL, 2=HIGH, 3=MEDIUM, 4=LOW


class ValidationResult(BaseModel):
    """Result of word or chain validation."""
    valid: bool
    complete: bool = False
    errors: List[ValidationError] = Field(default_factory=list)
    warnings: List[ValidationError] = Field(default_factory=list)
    words: List[str] = Field(default_factory=list)
    letters_used: List[str] = Field(default_factory=list)
    missing_letters: List[str] = Field(default_factory=list)
    score: Optional[float] = None
