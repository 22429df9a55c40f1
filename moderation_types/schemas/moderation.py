from pydantic import BaseModel, Field
from typing import Dict


class ModerationResult(BaseModel):
    """
    Moderation verdict for a single input string.

    ``categories`` holds the per-category violation flags and
    ``category_scores`` the model's confidence for each category, between
    0 and 1. Scores are confidences, not probabilities, and are kept exactly
    as received. Keys outside the known category set are kept as well.

    Fields are validated strictly: a string where a boolean or number is
    expected is rejected rather than converted. Attributes cannot be
    reassigned, but the two maps are plain dicts shared with the caller and
    must be treated as read-only.
    """

    flagged: bool = False
    categories: Dict[str, bool] = Field(default_factory=dict)
    category_scores: Dict[str, float] = Field(default_factory=dict)

    class Config:
        frozen = True
        strict = True
        extra = "ignore"

    def __hash__(self) -> int:
        return hash((
            self.flagged,
            frozenset(self.categories.items()),
            frozenset(self.category_scores.items()),
        ))

    def category(self, category: str) -> bool:
        """Return the violation flag for ``category``, ``False`` if absent."""
        return self.categories.get(category, False)

    def score(self, category: str) -> float:
        """Return the score for ``category``, ``0.0`` if absent."""
        return self.category_scores.get(category, 0.0)
