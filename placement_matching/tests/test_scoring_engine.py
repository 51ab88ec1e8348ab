"""
Unit tests for the rule table and the deterministic scoring functions.
"""

import unittest

from placement_matching.config import WEIGHTS
from placement_matching.rules import RULES, RELATED_SKILLS_RULE, education_label
from placement_matching.schemas import CandidateProfile, EducationLevel
from placement_matching.scoring_engine import (
    match_requirement,
    max_possible_score,
    calculate_match_percentage,
    aggregate_candidate,
    rank_results,
)


def make_candidate(candidate_id=1, **fields):
    fields.setdefault("name", f"Candidate {candidate_id}")
    return CandidateProfile(id=candidate_id, **fields)


class TestRuleTable(unittest.TestCase):
    """The category -> weight -> reason mapping."""

    def test_primary_rule_order_and_weights(self):
        self.assertEqual([r.category for r in RULES], ["education", "course", "skill", "interest"])
        self.assertEqual([r.weight for r in RULES], [2.0, 2.0, 1.5, 1.0])
        self.assertEqual(RELATED_SKILLS_RULE.weight, 0.5)

    def test_reason_templates(self):
        self.assertEqual(
            RULES[2].reason("React", "React"),
            "Skill React satisfies requirement: React",
        )
        self.assertEqual(
            RULES[3].reason("Tecnologia", "tecnologia"),
            "Interest in tecnologia relates to requirement: Tecnologia",
        )
        self.assertEqual(
            RELATED_SKILLS_RULE.reason("Liderança"),
            "Related skills for requirement: Liderança",
        )


class TestMatchRequirement(unittest.TestCase):
    """One requirement against one candidate, per category."""

    def test_education_match(self):
        candidate = make_candidate(education_level=EducationLevel.SUPERIOR)
        match = match_requirement(candidate, "Ensino Superior completo")
        self.assertEqual(match.points_by_reason, [
            ("Education in Superior satisfies requirement: Ensino Superior completo", 2.0),
        ])

    def test_post_graduate_tier_matches_written_requirement(self):
        candidate = make_candidate(education_level=EducationLevel.POS_GRADUACAO)
        for requirement in ("Pós-graduação em Engenharia", "Pós graduação", "POS-GRADUACAO completa"):
            match = match_requirement(candidate, requirement)
            self.assertEqual(match.points_by_reason, [
                (f"Education in Pós-Graduação satisfies requirement: {requirement}", 2.0),
            ])

    def test_secondary_tier_matches_written_requirement(self):
        candidate = make_candidate(education_level=EducationLevel.ENSINO_MEDIO)
        match = match_requirement(candidate, "Ensino Médio completo")
        self.assertEqual(match.reasons, ["Education in Ensino Médio satisfies requirement: Ensino Médio completo"])
        self.assertFalse(match_requirement(candidate, "Ensino Superior").matched)

    def test_education_labels(self):
        self.assertEqual(education_label("tecnico"), "Técnico")
        self.assertEqual(education_label("Doutorado"), "Doutorado")
        self.assertIsNone(education_label(None))

    def test_unknown_education_value_passes_through(self):
        candidate = make_candidate(education_level="Doutorado")
        match = match_requirement(candidate, "Doutorado em Física")
        self.assertEqual(match.reasons, ["Education in Doutorado satisfies requirement: Doutorado em Física"])

    def test_skill_containing_requirement_earns_only_bonus(self):
        candidate = make_candidate(skills=["React Native"])
        match = match_requirement(candidate, "React")
        self.assertEqual(match.points_by_reason, [("Related skills for requirement: React", 0.5)])

    def test_course_match_is_accent_and_case_insensitive(self):
        candidate = make_candidate(course="Ciencia da Computacao")
        match = match_requirement(candidate, "CIÊNCIA DA COMPUTAÇÃO")
        self.assertEqual(match.points, 2.0)
        self.assertEqual(match.reasons, ["Course in Ciencia da Computacao satisfies requirement: CIÊNCIA DA COMPUTAÇÃO"])

    def test_each_matching_skill_scores(self):
        candidate = make_candidate(skills=["Python", "SQL", "Excel"])
        match = match_requirement(candidate, "Python e SQL")
        self.assertEqual(match.points, 3.0)
        self.assertEqual(match.reasons, [
            "Skill Python satisfies requirement: Python e SQL",
            "Skill SQL satisfies requirement: Python e SQL",
        ])

    def test_interest_match(self):
        candidate = make_candidate(interests=["Tecnologia", "Música"])
        match = match_requirement(candidate, "Interesse em tecnologia")
        self.assertEqual(match.points, WEIGHTS["interest"])

    def test_categories_are_additive(self):
        candidate = make_candidate(
            education_level="superior",
            course="Administração",
            skills=["Excel"],
            interests=["Finanças"],
        )
        match = match_requirement(candidate, "Superior em Administração, Excel, finanças")
        self.assertEqual(match.points, 2.0 + 2.0 + 1.5 + 1.0)
        self.assertEqual(len(match.reasons), 4)

    def test_related_skills_bonus_once_per_requirement(self):
        candidate = make_candidate(skills=["Lideranca de equipe", "Liderança situacional"])
        match = match_requirement(candidate, "Liderança")
        self.assertEqual(match.points_by_reason, [("Related skills for requirement: Liderança", 0.5)])

    def test_related_skills_bonus_excluded_when_primary_matched(self):
        candidate = make_candidate(skills=["React", "React Native"])
        match = match_requirement(candidate, "React")
        self.assertEqual(match.points, 1.5)
        self.assertNotIn("Related skills for requirement: React", match.reasons)

    def test_missing_fields_yield_nothing(self):
        candidate = make_candidate()
        match = match_requirement(candidate, "Python")
        self.assertFalse(match.matched)
        self.assertEqual(match.points, 0)

    def test_blank_requirement_yields_nothing(self):
        candidate = make_candidate(skills=["Python"])
        self.assertFalse(match_requirement(candidate, "   ").matched)

    def test_blank_profile_values_are_ignored(self):
        candidate = make_candidate(course="  ", skills=["", " "], interests=None)
        self.assertEqual(candidate.skills, [])
        self.assertFalse(match_requirement(candidate, "Python").matched)


class TestAggregation(unittest.TestCase):

    def test_max_possible_score(self):
        self.assertEqual(max_possible_score([]), 0)
        self.assertEqual(max_possible_score(["a", "b", "c"]), 6.0)

    def test_percentage_guards_zero_maximum(self):
        self.assertEqual(calculate_match_percentage(0, 0), 0)
        self.assertEqual(calculate_match_percentage(3.0, 0), 0)

    def test_percentage_is_not_capped(self):
        self.assertEqual(calculate_match_percentage(4.5, 2.0), 225.0)

    def test_aggregate_keeps_requirement_order(self):
        candidate = make_candidate(skills=["SQL", "Python"])
        result = aggregate_candidate(candidate, ["Python", "SQL"])
        self.assertEqual(result.score, 3.0)
        self.assertEqual(result.match_percentage, 75.0)
        self.assertEqual(result.reasons, [
            "Skill Python satisfies requirement: Python",
            "Skill SQL satisfies requirement: SQL",
        ])
        self.assertFalse(result.is_overqualified)

    def test_duplicate_reasons_are_kept(self):
        candidate = make_candidate(skills=["Python"])
        result = aggregate_candidate(candidate, ["Python", "Python"])
        self.assertEqual(result.reasons, ["Skill Python satisfies requirement: Python"] * 2)

    def test_aggregate_with_no_requirements(self):
        result = aggregate_candidate(make_candidate(skills=["Python"]), [])
        self.assertEqual(result.score, 0)
        self.assertEqual(result.match_percentage, 0)
        self.assertEqual(result.reasons, [])


class TestRanking(unittest.TestCase):

    def test_drops_zero_scores_and_sorts_descending(self):
        requirements = ["Python", "SQL"]
        both = aggregate_candidate(make_candidate(1, skills=["Python", "SQL"]), requirements)
        one = aggregate_candidate(make_candidate(2, skills=["Python"]), requirements)
        none = aggregate_candidate(make_candidate(3, skills=["Java"]), requirements)

        ranked = rank_results([one, none, both])
        self.assertEqual([r.candidate.id for r in ranked], [1, 2])

    def test_ties_keep_input_order(self):
        requirements = ["React"]
        results = [
            aggregate_candidate(make_candidate(i, skills=["React"]), requirements)
            for i in (7, 3, 5)
        ]
        self.assertEqual([r.candidate.id for r in rank_results(results)], [7, 3, 5])
        self.assertEqual([r.candidate.id for r in rank_results(results[::-1])], [5, 3, 7])

    def test_empty_input(self):
        self.assertEqual(rank_results([]), [])


if __name__ == "__main__":
    unittest.main()
