from skillsync.utils.text_cleanup import clean_document_text


def test_whitespace_and_artifacts():
    raw = "Line one\xa0  here\r\n\n\n\nLine two (cid:3)"
    assert clean_document_text(raw) == "Line one here\n\nLine two"


def test_en_dash_is_kept_for_date_ranges():
    assert clean_document_text("2019 – 2021") == "2019 – 2021"


def test_lines_are_trimmed():
    assert clean_document_text("  Jane Smith  \n\tEngineer ") == "Jane Smith\nEngineer"
