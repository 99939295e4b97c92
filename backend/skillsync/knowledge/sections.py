"""
Section vocabulary — keywords that open and close résumé sections.

Matching is substring-based on the lowercased line, so "Work Experience",
"PROFESSIONAL EXPERIENCE" and "Experience:" all trigger the same section.
"""

EXPERIENCE_TRIGGERS = ("experience", "work history", "employment")
SKILLS_TRIGGERS = ("skills", "technical", "competencies")
EDUCATION_TRIGGERS = ("education", "qualification", "degree", "university", "college", "school")

# A section is closed by a heading that belongs somewhere else
EXPERIENCE_TERMINATORS = ("education", "skills", "projects")
SKILLS_TERMINATORS = ("experience", "education", "projects")
EDUCATION_TERMINATORS = ("experience", "skills", "projects")

# Collected as education evidence wherever they appear
DEGREE_KEYWORDS = ("mba", "btech", "bcom", "bca", "mca", "phd", "masters", "bachelor")
