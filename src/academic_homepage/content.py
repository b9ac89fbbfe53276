"""Parsers for the hand-written content documents (research, talks, CV)."""
from __future__ import annotations

import logging
import re
from importlib import resources
from pathlib import Path
from typing import Dict, List, Optional

from .models import ContentSection

logger = logging.getLogger(__name__)

BLOCK_SEPARATOR = re.compile(r"\n---\n")
LINK_PATTERN = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")
BOLD_PATTERN = re.compile(r"\*\*(.+?)\*\*")
ITALIC_PATTERN = re.compile(r"\*(.+?)\*")
CV_SECTION_PATTERN = re.compile(r"^## ", re.MULTILINE)
BLANK_LINE_PATTERN = re.compile(r"\n\s*\n")


def format_inline(text: str) -> str:
    """Convert ``[text](url)``, ``**bold**`` and ``*italic*`` to HTML."""
    text = LINK_PATTERN.sub(r'<a href="\2" target="_blank" rel="noopener">\1</a>', text)
    text = BOLD_PATTERN.sub(r"<strong>\1</strong>", text)
    return ITALIC_PATTERN.sub(r"<em>\1</em>", text)


def split_blocks(text: str) -> List[str]:
    normalized = text.replace("\r\n", "\n").strip()
    if not normalized:
        return []
    return BLOCK_SEPARATOR.split(normalized)


def _non_empty_lines(block: str) -> List[str]:
    return [line.strip() for line in block.strip().split("\n") if line.strip()]


def parse_research(text: str) -> str:
    """First block is the intro; later blocks are a tag, an optional ``# title`` and body."""
    blocks = split_blocks(text)
    if not blocks:
        return ""

    html = f'<p class="research-intro">{format_inline(blocks[0].strip())}</p>'
    for block in blocks[1:]:
        lines = block.strip().split("\n")
        tag = lines[0].strip()
        title = ""
        body: List[str] = []
        for line in lines[1:]:
            stripped = line.strip()
            if stripped.startswith("# "):
                title = stripped[2:]
            elif stripped:
                body.append(stripped)
        paragraph = f"<p>{format_inline(' '.join(body))}</p>"
        if title:
            html += (
                '<div class="research-block">'
                f'<span class="research-tag">{tag}</span>'
                f"<h3>{format_inline(title)}</h3>{paragraph}</div>"
            )
        else:
            html += f'<div class="research-block"><h3>{format_inline(tag)}</h3>{paragraph}</div>'
    return html


def parse_talks(text: str) -> str:
    """Each block holds type, title, venue and date lines."""
    html = ""
    for block in split_blocks(text):
        lines = _non_empty_lines(block)
        if len(lines) < 4:
            continue
        kind, title, venue, date = lines[:4]
        html += (
            '<article class="talk">'
            f'<span class="talk-type">{kind}</span>'
            f'<h3 class="talk-title">{format_inline(title)}</h3>'
            f'<p class="talk-venue">{format_inline(venue)}</p>'
            f'<p class="talk-date">{date}</p>'
            "</article>"
        )
    return html


def parse_cv(text: str) -> str:
    """``## `` headers open sections; entries are separated by blank lines.

    Entry lines are: date range, title, optional location, optional detail.
    """
    html = ""
    for section_text in CV_SECTION_PATTERN.split(text.replace("\r\n", "\n").strip()):
        if not section_text.strip():
            continue
        section_lines = section_text.strip().split("\n")
        section_title = section_lines[0].strip()
        section_body = "\n".join(section_lines[1:]).strip()

        html += f'<div class="cv-section"><h3>{section_title}</h3>'
        for entry in BLANK_LINE_PATTERN.split(section_body):
            lines = _non_empty_lines(entry)
            if len(lines) < 2:
                continue
            date = lines[0].replace("--", "–")
            html += (
                '<div class="cv-item">'
                f'<span class="cv-date">{date}</span>'
                '<div class="cv-content">'
                f"<strong>{format_inline(lines[1])}</strong>"
            )
            if len(lines) > 2:
                html += f"<p>{format_inline(lines[2])}</p>"
            if len(lines) > 3:
                html += f'<p class="cv-detail">{format_inline(lines[3])}</p>'
            html += "</div></div>"
        html += "</div>"
    return html


SECTIONS = (
    ContentSection("research.md", "research", "Research", parse_research),
    ContentSection("talks.md", "talks", "Talks & Posters", parse_talks),
    ContentSection("cv.md", "cv", "CV", parse_cv),
)


def get_section(container_id: str) -> Optional[ContentSection]:
    for section in SECTIONS:
        if section.container_id == container_id:
            return section
    return None


def fallback_text(file_name: str) -> Optional[str]:
    """Return the bundled copy of a content document, if one ships with the package."""
    resource = resources.files("academic_homepage").joinpath("content").joinpath(file_name)
    try:
        return resource.read_text(encoding="utf-8")
    except OSError:
        return None


def load_section(content_dir: Path, section: ContentSection) -> str:
    """Read and render one section; an unreadable file falls back to the bundled copy."""
    path = Path(content_dir) / section.file_name
    try:
        text: Optional[str] = path.read_text(encoding="utf-8")
    except OSError as exc:
        logger.warning("Content load error (%s), using fallback: %s", section.file_name, exc)
        text = fallback_text(section.file_name)
        if text is None:
            return ""
    return f"<h2>{section.heading}</h2>{section.parser(text)}"


def load_sections(content_dir: Path) -> Dict[str, str]:
    return {section.container_id: load_section(content_dir, section) for section in SECTIONS}
