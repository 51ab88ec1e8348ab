from __future__ import annotations

from enum import Enum
from typing import List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, validator


class EducationLevel(str, Enum):
    ENSINO_MEDIO = "ensino_medio"
    TECNICO = "tecnico"
    SUPERIOR = "superior"
    POS_GRADUACAO = "pos_graduacao"


def split_tokens(value) -> List[str]:
    """Turn a directory value (list, comma-separated string or None) into clean tokens."""
    if value is None:
        return []
    if isinstance(value, str):
        value = value.split(",")
    return [str(token).strip() for token in value if token is not None and str(token).strip()]


class CandidateProfile(BaseModel):
    """A candidate as supplied by the directory. Read-only during a matching run."""
    model_config = ConfigDict(frozen=True)

    id: Union[int, str]
    name: str
    email: Optional[str] = None
    age: Optional[int] = None
    education_level: Optional[str] = None
    course: Optional[str] = None
    skills: List[str] = Field(default_factory=list)
    interests: List[str] = Field(default_factory=list)

    @validator("education_level", pre=True)
    def coerce_education_level(cls, v):
        if isinstance(v, EducationLevel):
            return v.value
        return v

    @validator("skills", "interests", pre=True)
    def coerce_tokens(cls, v):
        return split_tokens(v)


class RequirementMatch(BaseModel):
    """Points a single requirement earned for one candidate, one entry per reason."""
    requirement: str
    points_by_reason: List[Tuple[str, float]] = Field(default_factory=list)

    @property
    def points(self) -> float:
        return sum(points for _, points in self.points_by_reason)

    @property
    def reasons(self) -> List[str]:
        return [reason for reason, _ in self.points_by_reason]

    @property
    def matched(self) -> bool:
        return bool(self.points_by_reason)


class MatchResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    candidate: CandidateProfile
    score: float = Field(ge=0.0)
    match_percentage: float = Field(ge=0.0, description="Not capped at 100")
    reasons: List[str] = Field(default_factory=list)
    # Reserved; no rule sets it
    is_overqualified: bool = False
