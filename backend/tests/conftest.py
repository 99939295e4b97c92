import random

import pytest

from skillsync.services import profile_store

SAMPLE_RESUME = """Jane Smith
jane.smith@example.com | (555) 123-4567
Experience
Senior Software Engineer
Acme Corp, 2019 - Present
Built payment services used by millions of customers
Education
Bachelor of Science in Computer Science
Skills
Python, Leadership, Data Analysis"""


@pytest.fixture
def sample_resume():
    return SAMPLE_RESUME


@pytest.fixture
def rng():
    return random.Random(42)


@pytest.fixture(autouse=True)
def empty_profile_store():
    profile_store.clear_results()
    yield
    profile_store.clear_results()
