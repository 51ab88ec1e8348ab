"""
Main Matcher Module

Orchestrates a complete matching run:
1. Check the inputs are proper sequences
2. Score every candidate against the opportunity requirements
3. Filter and rank, returning results with their reasons
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, List, Optional, Sequence

from .config import ENGINE_CONFIG, RECORD_FIELD_ALIASES
from .schemas import CandidateProfile, MatchResult
from .scoring_engine import aggregate_candidate, rank_results

logger = logging.getLogger(__name__)


def _check_preconditions(requirements, candidates) -> None:
    if not isinstance(requirements, (list, tuple)):
        raise TypeError(
            f"requirements must be a list of strings, got {type(requirements).__name__}; "
            "wrap a single requirement in a list before matching"
        )
    for requirement in requirements:
        if not isinstance(requirement, str):
            raise TypeError(f"requirement must be a string, got {type(requirement).__name__}")
    if not isinstance(candidates, (list, tuple)):
        raise TypeError(f"candidates must be a list of CandidateProfile, got {type(candidates).__name__}")
    for candidate in candidates:
        if not isinstance(candidate, CandidateProfile):
            raise TypeError(f"candidate must be a CandidateProfile, got {type(candidate).__name__}")


def compute_matches(
    requirements: Sequence[str],
    candidates: Sequence[CandidateProfile],
    max_workers: Optional[int] = None,
) -> List[MatchResult]:
    """
    Match a pool of candidates against one opportunity's requirements.

    This is the engine's single entry point. Candidates are scored
    independently, so larger pools can be fanned out to a thread pool;
    results are collected in input order either way, so the output does
    not depend on max_workers.

    Args:
        requirements: The opportunity's requirement strings (list or tuple)
        candidates: Candidate profiles to score
        max_workers: Thread count for scoring; defaults to ENGINE_CONFIG

    Returns:
        Results with score > 0, highest match percentage first.
        Equal percentages keep the candidates' input order.

    Raises:
        TypeError: If requirements or candidates are not sequences of the
            expected types (e.g. a bare requirement string)

    Example:
        >>> results = compute_matches(["React"], [candidate])
        >>> print(f"{results[0].match_percentage}%")
        75.0%
    """
    _check_preconditions(requirements, candidates)

    requirements = tuple(requirements)
    candidates = tuple(candidates)
    if not requirements or not candidates:
        logger.info(f"Nothing to match ({len(requirements)} requirements, {len(candidates)} candidates)")
        return []

    if max_workers is None:
        max_workers = ENGINE_CONFIG["max_workers"]

    logger.info(f"Matching {len(candidates)} candidates against {len(requirements)} requirements")

    if max_workers and max_workers > 1 and len(candidates) >= ENGINE_CONFIG["parallel_threshold"]:
        logger.debug(f"Scoring with {max_workers} worker threads")
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            scored = list(executor.map(lambda c: aggregate_candidate(c, requirements), candidates))
    else:
        scored = [aggregate_candidate(candidate, requirements) for candidate in candidates]

    ranked = rank_results(scored)

    if ranked:
        logger.info(f"Retained {len(ranked)}/{len(candidates)} candidates, "
                    f"top match: {ranked[0].match_percentage:.2f}%")
    else:
        logger.info(f"No candidate matched any of {len(requirements)} requirements")

    return ranked


def coerce_requirements(value: Any) -> List[str]:
    """
    Coerce an opportunity's stored requirements into a list for compute_matches.

    Opportunity records may hold a single string instead of a list.

    Example:
        >>> coerce_requirements("Python")
        ['Python']
    """
    if value is None:
        return []
    if isinstance(value, str):
        value = [value]
    return [str(item).strip() for item in value if item is not None and str(item).strip()]


def candidate_from_record(record: Dict[str, Any]) -> CandidateProfile:
    """Build a CandidateProfile from a directory record, accepting its native field names."""
    data = {}
    for key, value in record.items():
        data[RECORD_FIELD_ALIASES.get(key, key)] = value
    return CandidateProfile(**{k: v for k, v in data.items() if k in CandidateProfile.model_fields})


def search_candidates(candidates: Sequence[CandidateProfile], term: Optional[str]) -> List[CandidateProfile]:
    """Case-insensitive filter on candidate name or email. An empty term keeps everyone."""
    if not term or not term.strip():
        return list(candidates)
    needle = term.strip().lower()
    return [
        c for c in candidates
        if needle in c.name.lower() or (c.email and needle in c.email.lower())
    ]
