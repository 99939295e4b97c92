from skillsync.services.section_segmenter import (
    Section,
    SectionLine,
    advance,
    is_heading,
    iter_section,
    segment,
    split_lines,
)


def test_split_lines_keeps_blank_lines():
    assert split_lines("a\n\nb") == ["a", "", "b"]


def test_trigger_enters_section():
    assert advance(Section.NONE, "work experience", Section.EXPERIENCE) == (Section.EXPERIENCE, True)
    assert advance(Section.NONE, "employment history", Section.EXPERIENCE) == (Section.EXPERIENCE, True)
    assert advance(Section.EXPERIENCE, "core competencies", Section.SKILLS) == (Section.SKILLS, True)


def test_other_heading_leaves_section():
    assert advance(Section.EXPERIENCE, "education", Section.EXPERIENCE) == (Section.NONE, False)
    assert advance(Section.SKILLS, "projects", Section.SKILLS) == (Section.NONE, False)
    assert advance(Section.EDUCATION, "technical skills", Section.EDUCATION) == (Section.NONE, False)


def test_plain_line_keeps_state():
    assert advance(Section.EXPERIENCE, "acme corp", Section.EXPERIENCE) == (Section.EXPERIENCE, False)
    assert advance(Section.NONE, "education", Section.EXPERIENCE) == (Section.NONE, False)


def test_none_target_never_moves():
    assert advance(Section.NONE, "experience", Section.NONE) == (Section.NONE, False)


def test_iter_section_excludes_heading_and_stops_at_next_section():
    lines = ["Jane", "Experience", "Acme", "Education", "BSc Physics"]
    assert list(iter_section(lines, Section.EXPERIENCE)) == [SectionLine(2, "Acme")]
    assert list(iter_section(lines, Section.EDUCATION)) == [SectionLine(4, "BSc Physics")]


def test_inline_heading_yields_content_after_colon():
    lines = ["Skills: Python, SQL", "Technical Skills:"]
    assert list(iter_section(lines, Section.SKILLS)) == [SectionLine(0, "Python, SQL")]


def test_colon_without_trigger_in_heading_is_plain_content():
    lines = ["Skills", "Tools: Git, Docker"]
    assert list(iter_section(lines, Section.SKILLS)) == [SectionLine(1, "Tools: Git, Docker")]


def test_sections_can_overlap():
    lines = ["Technical Experience", "Python"]
    sections = segment(lines)
    assert sections[Section.EXPERIENCE] == [SectionLine(1, "Python")]
    assert sections[Section.SKILLS] == [SectionLine(1, "Python")]
    assert sections[Section.EDUCATION] == []


def test_lines_are_trimmed():
    lines = ["  Experience  ", "   Acme Corp   "]
    assert list(iter_section(lines, Section.EXPERIENCE)) == [SectionLine(1, "Acme Corp")]


def test_heading_labels():
    assert is_heading("Skills", Section.SKILLS)
    assert is_heading("Technical Skills", Section.SKILLS)
    assert is_heading("Core Competencies", Section.SKILLS)
    assert is_heading("Employment History", Section.EXPERIENCE)
    assert is_heading("Qualifications", Section.EDUCATION)


def test_titles_with_trigger_words_are_not_headings():
    assert not is_heading("Technical Lead", Section.SKILLS)
    assert not is_heading("Senior Technical Skills Program Coordinator", Section.SKILLS)
    assert not is_heading("Tools", Section.SKILLS)


def test_trigger_line_without_heading_yields_nothing():
    lines = ["Technical Lead: Acme Corp, 2019 - Present", "Python"]
    assert list(iter_section(lines, Section.SKILLS)) == [SectionLine(1, "Python")]
