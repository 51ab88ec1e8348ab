"""
Deterministic Scoring Engine

All scoring functions are pure - same inputs produce same outputs.
Candidates and requirements are only read, never modified.
"""

import logging
from typing import List, Sequence

from .config import MAX_POINTS_PER_REQUIREMENT
from .normalizer import normalize
from .rules import RULES, RELATED_SKILLS_RULE
from .schemas import CandidateProfile, MatchResult, RequirementMatch

logger = logging.getLogger(__name__)


def match_requirement(candidate: CandidateProfile, requirement: str) -> RequirementMatch:
    """
    Score a single requirement against one candidate.

    Every primary rule is applied; matches are additive and each matching
    value contributes its own reason line. When nothing matched, the
    related-skills rule awards its flat bonus once if any skill loosely
    relates to the requirement.

    Args:
        candidate: Candidate profile
        requirement: Free-text requirement as written on the opportunity

    Returns:
        RequirementMatch with one (reason, points) entry per match
    """
    points_by_reason = []
    if not normalize(requirement):
        return RequirementMatch(requirement=requirement)

    for rule in RULES:
        for value in rule.values(candidate):
            if rule.relates(requirement, value):
                points_by_reason.append((rule.reason(requirement, value), rule.weight))
                logger.debug(f"{rule.category} '{value}' matches '{requirement}' (+{rule.weight})")

    if not points_by_reason:
        related = [
            skill for skill in RELATED_SKILLS_RULE.values(candidate)
            if RELATED_SKILLS_RULE.relates(requirement, skill)
        ]
        if related:
            points_by_reason.append((RELATED_SKILLS_RULE.reason(requirement), RELATED_SKILLS_RULE.weight))
            logger.debug(f"Related skills {related} for '{requirement}' (+{RELATED_SKILLS_RULE.weight})")

    return RequirementMatch(requirement=requirement, points_by_reason=points_by_reason)


def max_possible_score(requirements: Sequence[str]) -> float:
    """Theoretical maximum: education + course weight for every requirement."""
    return len(requirements) * MAX_POINTS_PER_REQUIREMENT


def calculate_match_percentage(score: float, max_score: float) -> float:
    """
    Convert a raw score into a percentage of the theoretical maximum.

    Not capped: skills, interests and the related-skills bonus add points the
    maximum does not account for, so values above 100 are expected.
    Returns exactly 0 when there is nothing to score against.
    """
    if max_score <= 0:
        return 0.0
    return (score / max_score) * 100


def aggregate_candidate(candidate: CandidateProfile, requirements: Sequence[str]) -> MatchResult:
    """
    Accumulate points for every requirement and build the candidate's MatchResult.

    Reasons keep requirement order, then rule-table order within a requirement.

    Args:
        candidate: Candidate profile
        requirements: Requirement strings of one opportunity

    Returns:
        MatchResult (may have a zero score; filtering happens in rank_results)
    """
    score = 0.0
    reasons: List[str] = []
    for requirement in requirements:
        requirement_match = match_requirement(candidate, requirement)
        score += requirement_match.points
        reasons.extend(requirement_match.reasons)

    percentage = calculate_match_percentage(score, max_possible_score(requirements))
    logger.debug(f"Candidate {candidate.id}: score={score:.2f}, match={percentage:.2f}%")

    return MatchResult(
        candidate=candidate,
        score=score,
        match_percentage=percentage,
        reasons=reasons,
    )


def rank_results(results: Sequence[MatchResult]) -> List[MatchResult]:
    """
    Drop non-scoring results and order the rest by match percentage, highest first.

    The sort is stable: candidates with equal percentages keep their input order.
    """
    retained = [r for r in results if r.score > 0 and r.match_percentage > 0]
    return sorted(retained, key=lambda r: r.match_percentage, reverse=True)
