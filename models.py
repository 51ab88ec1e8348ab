from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, validator

from placement_matching import CandidateProfile, MatchResult, coerce_requirements


class MatchRequest(BaseModel):
    requirements: List[str] = Field(
        default_factory=list,
        description="Opportunity requirements; a single string is treated as one requirement",
    )
    candidates: List[CandidateProfile] = Field(default_factory=list)
    search: Optional[str] = Field(
        default=None,
        description="Only match candidates whose name or email contains this term",
    )

    @validator("requirements", pre=True)
    def coerce_requirement_list(cls, v):
        if v is None or isinstance(v, (str, list, tuple)):
            return coerce_requirements(v)
        return v


class MatchResponse(BaseModel):
    request_id: str
    results: List[MatchResult]
    candidates_evaluated: int
    candidates_matched: int
    processing_time: str


class Settings(BaseModel):
    model_config = ConfigDict(protected_namespaces=())
    log_level: str = "INFO"
    match_max_workers: Optional[int] = None
    max_candidates_per_request: int = 5000
    cors_allow_origins: List[str] = Field(default_factory=lambda: ["*"])
