"""
Rule-Based Candidate-Opportunity Matching

This package scores a pool of candidate profiles against the free-text
requirements of one opportunity:
1. Each requirement is compared with the candidate's education, course,
   skills and interests (accent- and case-insensitive)
2. Points accumulate into a score and a percentage of the theoretical maximum
3. Zero-scoring candidates are dropped and the rest ranked, each with reasons

Usage:
    from placement_matching import compute_matches, CandidateProfile

    results = compute_matches(["Python", "SQL"], candidates)
    for result in results:
        print(f"{result.candidate.name}: {result.match_percentage}%")
"""

from .matcher import compute_matches, coerce_requirements, candidate_from_record, search_candidates
from .schemas import CandidateProfile, EducationLevel, MatchResult
from .config import WEIGHTS

__all__ = [
    "compute_matches",
    "coerce_requirements",
    "candidate_from_record",
    "search_candidates",
    "CandidateProfile",
    "EducationLevel",
    "MatchResult",
    "WEIGHTS",
]
__version__ = "1.0.0"
