"""Data models for the publication and content pipelines."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple

DOI_RESOLVER = "https://doi.org/"


@dataclass
class RawRecord:
    """A paper record as received from a bibliographic source."""

    title: Optional[str] = None
    year: Optional[int] = None
    venue: Optional[str] = None
    identifier: Optional[str] = None
    authors: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class Publication:
    """Normalized, immutable publication used for dedup, ordering and rendering."""

    title: str
    venue: str
    year: Optional[int] = None
    identifier: Optional[str] = None
    is_preprint: bool = False
    authors: Tuple[str, ...] = ()

    @property
    def link(self) -> Optional[str]:
        """Return the canonical DOI link, if the publication has an identifier."""
        if self.identifier:
            return f"{DOI_RESOLVER}{self.identifier}"
        return None

    @property
    def sort_year(self) -> int:
        return self.year or 0


@dataclass(frozen=True)
class FormattedAuthor:
    """Display form of a single author name."""

    full_name: str
    display_name: str
    co_first: bool = False

    def __str__(self) -> str:
        return f"{self.display_name}*" if self.co_first else self.display_name


@dataclass
class PublicationsResult:
    """Outcome of a single publications load."""

    publications: List[Publication] = field(default_factory=list)
    suppressed: List[Publication] = field(default_factory=list)
    error: Optional[str] = None
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class ContentSection:
    """A static text document and the container it renders into."""

    file_name: str
    container_id: str
    heading: str
    parser: Callable[[str], str]
