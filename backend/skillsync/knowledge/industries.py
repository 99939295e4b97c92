"""
Industry knowledge tables.

Every table is keyed by industry name and is read-only. Declaration order of
INDUSTRY_KEYWORDS is the detection order used everywhere downstream (skills,
target roles, gaps, matches, roadmap phases).

Only five industries carry a full knowledge set. Manufacturing, Education and
Consulting are detected but fall back to the generic tables.
"""

from types import MappingProxyType

INDUSTRY_KEYWORDS = MappingProxyType({
    "Technology": ("software", "technology", "tech", "programming", "development", "coding"),
    "Healthcare": ("healthcare", "medical", "pharmaceutical", "pharma", "clinical"),
    "Finance": ("finance", "banking", "investment", "financial", "accounting"),
    "Infrastructure": ("infrastructure", "construction", "real estate", "civil"),
    "Energy": ("energy", "oil", "gas", "petroleum", "renewable"),
    "Manufacturing": ("manufacturing", "production", "industrial", "factory"),
    "Education": ("education", "teaching", "academic", "university", "school"),
    "Consulting": ("consulting", "advisory", "strategy", "management consulting"),
})

# (name, level, category)
INDUSTRY_SKILLS = MappingProxyType({
    "Technology": (
        ("Software Development", 80, "Technical"),
        ("System Design", 75, "Technical"),
        ("Agile Methodology", 70, "Process"),
    ),
    "Healthcare": (
        ("Healthcare Regulations", 85, "Compliance"),
        ("Patient Care", 80, "Healthcare"),
        ("Medical Documentation", 75, "Documentation"),
    ),
    "Finance": (
        ("Financial Analysis", 85, "Finance"),
        ("Risk Management", 80, "Finance"),
        ("Regulatory Compliance", 75, "Compliance"),
    ),
    "Infrastructure": (
        ("Project Management", 85, "Management"),
        ("Infrastructure Planning", 80, "Engineering"),
        ("Quality Assurance", 75, "Quality"),
    ),
    "Energy": (
        ("Energy Management", 85, "Technical"),
        ("Safety Protocols", 90, "Safety"),
        ("Environmental Compliance", 80, "Compliance"),
    ),
})

# ── Career direction ────────────────────────────────────────────────────────

TARGET_ROLES = MappingProxyType({
    "Technology": ("Senior Software Engineer", "Tech Lead", "Engineering Manager"),
    "Healthcare": ("Healthcare Manager", "Clinical Director", "Healthcare Consultant"),
    "Finance": ("Financial Manager", "Investment Analyst", "Finance Director"),
    "Infrastructure": ("Project Manager", "Infrastructure Director", "Construction Manager"),
    "Energy": ("Energy Manager", "Operations Director", "Sustainability Manager"),
})
GENERIC_TARGET_ROLES = ("Senior Manager", "Director", "Consultant")

# (skill, importance, time to learn, resources)
SKILL_GAPS = MappingProxyType({
    "Technology": (
        ("Cloud Computing", "High", "3-4 months", ("AWS Certification", "Cloud Courses")),
        ("DevOps", "Medium", "2-3 months", ("DevOps Training", "CI/CD Courses")),
    ),
    "Healthcare": (
        ("Digital Health", "High", "4-6 months", ("Digital Health Courses",)),
        ("Healthcare Analytics", "Medium", "3-4 months", ("Analytics Training",)),
    ),
    "Finance": (
        ("FinTech", "High", "3-4 months", ("FinTech Courses",)),
        ("Blockchain", "Medium", "2-3 months", ("Blockchain Training",)),
    ),
    "Infrastructure": (
        ("Smart Infrastructure", "High", "4-5 months", ("IoT Courses", "Smart City Training")),
        ("Sustainable Development", "Medium", "2-3 months", ("Green Building Certification",)),
    ),
    "Energy": (
        ("Renewable Energy", "High", "4-6 months", ("Renewable Energy Courses",)),
        ("Carbon Management", "High", "3-4 months", ("Sustainability Certification",)),
    ),
})

BASE_REQUIREMENTS = ("Professional Experience", "Industry Knowledge", "Communication Skills")

INDUSTRY_REQUIREMENTS = MappingProxyType({
    "Technology": ("Technical Skills", "Software Development", "Agile Methodology"),
    "Healthcare": ("Healthcare Regulations", "Patient Care", "Medical Knowledge"),
    "Finance": ("Financial Analysis", "Risk Management", "Regulatory Knowledge"),
    "Infrastructure": ("Project Management", "Engineering Knowledge", "Quality Assurance"),
    "Energy": ("Energy Systems", "Safety Protocols", "Environmental Compliance"),
})

MISSING_SKILLS = MappingProxyType({
    "Technology": ("Cloud Computing", "DevOps", "Microservices"),
    "Healthcare": ("Digital Health", "Healthcare Analytics", "Telemedicine"),
    "Finance": ("FinTech", "Blockchain", "Algorithmic Trading"),
    "Infrastructure": ("Smart Infrastructure", "BIM Software", "Sustainable Design"),
    "Energy": ("Renewable Energy", "Smart Grid", "Carbon Management"),
})
GENERIC_MISSING_SKILLS = ("Digital Skills", "Advanced Analytics")

# ── Titles used when no experience entry names one ──────────────────────────

CURRENT_ROLE_TITLES = MappingProxyType({
    "Healthcare": "Healthcare Professional",
    "Finance": "Finance Professional",
    "Infrastructure": "Infrastructure Professional",
})

ROADMAP_STAGES = ("Foundation", "Intermediate", "Advanced")
ROADMAP_SHARED_RESOURCES = ("Industry Certifications", "Online Courses")
