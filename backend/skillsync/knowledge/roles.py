"""
Role archetype keywords and the skills each archetype implies.
"""

from types import MappingProxyType

ROLE_KEYWORDS = (
    "manager", "director", "analyst", "engineer", "developer", "consultant",
    "specialist", "coordinator", "supervisor", "lead", "senior", "junior",
    "associate", "executive", "officer", "administrator",
)

# (name, level, category)
ROLE_SKILLS = MappingProxyType({
    "manager": (
        ("Team Leadership", 85, "Leadership"),
        ("Strategic Planning", 80, "Strategy"),
    ),
    "analyst": (
        ("Data Analysis", 85, "Analytics"),
        ("Report Writing", 80, "Communication"),
    ),
    "engineer": (
        ("Technical Design", 85, "Technical"),
        ("Problem Solving", 80, "Analytical"),
    ),
    "consultant": (
        ("Client Management", 85, "Client Relations"),
        ("Business Strategy", 80, "Strategy"),
    ),
})
