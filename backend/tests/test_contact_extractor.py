from skillsync.services.contact_extractor import extract_email, extract_name, extract_phone


def test_name_is_first_plausible_line():
    assert extract_name(["John Doe", "Senior Software Engineer"]) == "John Doe"


def test_name_skips_contact_and_resume_lines():
    lines = ["RESUME", "jane@example.com", "+1 555 123 4567", "Al", "Jane Smith"]
    assert extract_name(lines) == "Jane Smith"


def test_name_only_looks_at_first_five_lines():
    assert extract_name(["", "", "", "", "", "Jane Smith"]) == "Professional"


def test_name_defaults_for_empty_document():
    assert extract_name([""]) == "Professional"


def test_name_is_trimmed():
    assert extract_name(["   Jane Smith   "]) == "Jane Smith"


def test_email():
    assert extract_email("Contact: john.doe@example.com, (123)") == "john.doe@example.com"
    assert extract_email("no address here") is None


def test_phone_international():
    assert extract_phone("Phone: +1-555-123-4567") == "+1-555-123-4567"


def test_phone_with_parentheses():
    assert extract_phone("john@example.com | (555) 123-4567") == "(555) 123-4567"


def test_phone_absent():
    assert extract_phone("no numbers here") is None


def test_phone_ignores_runs_of_blank_lines():
    assert extract_phone("Name" + "\n" * 11 + "End") is None
