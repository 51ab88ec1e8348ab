"""
Rule table for requirement matching.

Each rule maps a rule category to the profile values it inspects, the points
it awards per matching value and the reason it reports. Primary rules are
evaluated in table order; the related-skills rule runs only for requirements
no primary rule matched.
"""

from typing import Callable, List, NamedTuple, Optional

from .config import WEIGHTS, REASON_TEMPLATES, EDUCATION_LEVELS
from .normalizer import contains, shares_substring
from .schemas import CandidateProfile


class MatchRule(NamedTuple):
    category: str
    weight: float
    template: str
    values: Callable[[CandidateProfile], List[str]]
    # Whether a profile value relates to the requirement text
    relates: Callable[[str, str], bool]

    def reason(self, requirement: str, value: Optional[str] = None) -> str:
        return self.template.format(value=value, requirement=requirement)


def _single(value: Optional[str]) -> List[str]:
    if value and value.strip():
        return [value]
    return []


def education_label(level: Optional[str]) -> Optional[str]:
    """Readable label for a directory tier; unknown values pass through unchanged."""
    if level is None:
        return None
    return EDUCATION_LEVELS.get(level.strip(), level)


def satisfies(requirement: str, value: str) -> bool:
    """Primary relation: the requirement text mentions the profile value."""
    # One direction only. A value that merely contains the requirement
    # ("React Native" for "React") is left to the related-skills bonus.
    return contains(requirement, value)


def satisfies_education(requirement: str, label: str) -> bool:
    """Primary relation for education labels; "Pós-Graduação" also matches "Pós graduação"."""
    return satisfies(requirement, label) or satisfies(requirement, label.replace("-", " "))


def loosely_relates(requirement: str, value: str) -> bool:
    """Secondary relation: either text mentions the other."""
    return shares_substring(requirement, value)


def _rule(category: str, values: Callable[[CandidateProfile], List[str]], relates=satisfies) -> MatchRule:
    return MatchRule(
        category=category,
        weight=WEIGHTS[category],
        template=REASON_TEMPLATES[category],
        values=values,
        relates=relates,
    )


RULES = (
    _rule("education", lambda c: _single(education_label(c.education_level)), relates=satisfies_education),
    _rule("course", lambda c: _single(c.course)),
    _rule("skill", lambda c: list(c.skills)),
    _rule("interest", lambda c: list(c.interests)),
)

RELATED_SKILLS_RULE = _rule("related_skills", lambda c: list(c.skills), relates=loosely_relates)

