import logging
from pathlib import Path

from academic_homepage.content import (
    SECTIONS,
    format_inline,
    get_section,
    load_section,
    load_sections,
    parse_cv,
    parse_research,
    parse_talks,
)


def test_format_inline_handles_links_bold_and_italic():
    text = "See [lab](https://example.org) for **bold** and *Drosophila*."

    assert format_inline(text) == (
        'See <a href="https://example.org" target="_blank" rel="noopener">lab</a> '
        "for <strong>bold</strong> and <em>Drosophila</em>."
    )


def test_parse_research_intro_and_blocks():
    text = "Intro *text*.\n\n---\n\nCurrent\n# Internal states\nLine one.\nLine two.\n\n---\n\nApproach\nBody only."

    html = parse_research(text)

    assert html.startswith('<p class="research-intro">Intro <em>text</em>.</p>')
    assert '<span class="research-tag">Current</span><h3>Internal states</h3><p>Line one. Line two.</p>' in html
    assert '<div class="research-block"><h3>Approach</h3><p>Body only.</p></div>' in html


def test_parse_talks_skips_incomplete_blocks():
    text = "Talk\nTitle A\nVenue A\nJune 2023\n\n---\n\nPoster\nOnly a title"

    html = parse_talks(text)

    assert html.count('<article class="talk">') == 1
    assert '<span class="talk-type">Talk</span>' in html
    assert '<p class="talk-date">June 2023</p>' in html


def test_parse_cv_sections_and_entries():
    text = (
        "## Education\n\n2021--2024\nMSc, Biology\nUniversity of Konstanz\nThesis detail\n\n"
        "2017\nBSc\n\nlonely line\n\n## Funding\n\n2025--2028\n[Fellowship](https://example.org)"
    )

    html = parse_cv(text)

    assert html.count('<div class="cv-section">') == 2
    assert '<span class="cv-date">2021–2024</span>' in html
    assert '<p class="cv-detail">Thesis detail</p>' in html
    assert "lonely line" not in html
    assert '<a href="https://example.org" target="_blank" rel="noopener">Fellowship</a>' in html


def test_load_section_reads_configured_directory(tmp_path: Path):
    (tmp_path / "talks.md").write_text("Talk\nT\nV\nD", encoding="utf-8")

    html = load_section(tmp_path, get_section("talks"))

    assert html.startswith("<h2>Talks & Posters</h2>")
    assert '<h3 class="talk-title">T</h3>' in html


def test_missing_file_uses_bundled_fallback(tmp_path: Path, caplog):
    with caplog.at_level(logging.WARNING, logger="academic_homepage.content"):
        sections = load_sections(tmp_path / "missing")

    assert set(sections) == {section.container_id for section in SECTIONS}
    assert sections["research"].startswith("<h2>Research</h2>")
    assert "cv-section" in sections["cv"]
    assert len([r for r in caplog.records if r.name == "academic_homepage.content"]) == 3


def test_unknown_section_lookup():
    assert get_section("blog") is None
