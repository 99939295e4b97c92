"""
Rules for placing a free-text skill into a category.

KEYWORD_RULES are tried in order against the lowercased skill name; the first
rule with a matching substring wins. When none match, the first detected
industry listed in INDUSTRY_FALLBACK decides.
"""

KEYWORD_RULES = (
    (("manage", "lead", "plan"), "Management"),
    (("program", "code", "software"), "Technical"),
    (("analy", "data", "research"), "Analytics"),
    (("commun", "present", "write"), "Communication"),
    (("finance", "budget", "account"), "Finance"),
)

INDUSTRY_FALLBACK = (
    ("Technology", "Technical"),
    ("Healthcare", "Healthcare"),
    ("Finance", "Finance"),
    ("Infrastructure", "Engineering"),
)

DEFAULT_CATEGORY = "Professional"
