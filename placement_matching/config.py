"""
Configuration for the rule-based candidate-opportunity matching engine.
Adjust weights, reason templates and engine parameters here.
"""

# Points awarded per rule category when a profile attribute satisfies a requirement
WEIGHTS = {
    "education": 2.0,
    "course": 2.0,
    "skill": 1.5,  # Per matching skill
    "interest": 1.0,  # Per matching interest
    "related_skills": 0.5,  # Flat, once per otherwise-unmatched requirement
}

# Theoretical maximum per requirement (education + course only).
# Skills, interests and the related-skills bonus are not counted, so the
# match percentage can exceed 100.
MAX_POINTS_PER_REQUIREMENT = 2.0

# Human-readable justification for each rule category
REASON_TEMPLATES = {
    "education": "Education in {value} satisfies requirement: {requirement}",
    "course": "Course in {value} satisfies requirement: {requirement}",
    "skill": "Skill {value} satisfies requirement: {requirement}",
    "interest": "Interest in {value} relates to requirement: {requirement}",
    "related_skills": "Related skills for requirement: {requirement}",
}

# Display label for each education tier stored by the candidate directory
EDUCATION_LEVELS = {
    "ensino_medio": "Ensino Médio",
    "tecnico": "Técnico",
    "superior": "Superior",
    "pos_graduacao": "Pós-Graduação",
}

# Engine execution parameters
ENGINE_CONFIG = {
    "max_workers": None,  # None or 1 = score candidates sequentially
    "parallel_threshold": 50,  # Minimum pool size before fanning out to threads
}

# Directory record field names mapped to CandidateProfile fields
RECORD_FIELD_ALIASES = {
    "nome": "name",
    "idade": "age",
    "formacao": "education_level",
    "curso": "course",
    "habilidades": "skills",
    "interesses": "interests",
}
