"""High-level orchestrator for building the homepage."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple

from .config import SiteConfig
from .content import load_sections
from .dedup import partition_duplicates, sort_publications
from .formatter import AuthorListFormatter
from .graph_walk import Adjacency, extract_graph
from .matcher import TitleMatcher, TokenOverlapMatcher
from .models import Publication, PublicationsResult, RawRecord
from .normalization import normalize_record
from .rendering import (
    LOAD_FAILED_MESSAGE,
    NO_PUBLICATIONS_MESSAGE,
    render_message,
    render_page,
    render_publications,
)
from .sources import PublicationSource, PublicationSourceError, build_source

logger = logging.getLogger(__name__)


class HomepageApp:
    """Coordinates fetching, reconciling and rendering of the homepage."""

    def __init__(
        self,
        config: SiteConfig | None = None,
        source: PublicationSource | None = None,
        matcher: TitleMatcher | None = None,
    ):
        self.config = config or SiteConfig()
        self.source = source or build_source(self.config)
        self.matcher = matcher or TokenOverlapMatcher()
        self.author_formatter = AuthorListFormatter(
            self.config.owner(), self.config.co_first_authors
        )

    def reconcile(
        self, records: Iterable[RawRecord]
    ) -> Tuple[List[Publication], List[Publication]]:
        """Normalize, drop preprints with published versions and sort by year."""
        publications = [normalize_record(record) for record in records]
        kept, suppressed = partition_duplicates(publications, self.matcher)
        if suppressed:
            logger.info(
                "Suppressed %s preprint(s) with published versions", len(suppressed)
            )
        return sort_publications(kept), suppressed

    async def load_publications(self) -> PublicationsResult:
        try:
            records = await self.source.fetch_records()
        except PublicationSourceError as exc:
            logger.error("Error loading publications: %s", exc)
            return PublicationsResult(error="fetch-failed", message=LOAD_FAILED_MESSAGE)

        if not records:
            logger.warning("No publications returned by %s", self.source.name)
            return PublicationsResult(error="empty", message=NO_PUBLICATIONS_MESSAGE)

        kept, suppressed = self.reconcile(records)
        return PublicationsResult(publications=kept, suppressed=suppressed)

    def render_publications(self, result: PublicationsResult) -> str:
        if not result.ok:
            return render_message(result.message or LOAD_FAILED_MESSAGE)
        return render_publications(result.publications, self.author_formatter.format)

    def render_sections(self) -> Dict[str, str]:
        return load_sections(self.config.content_dir)

    async def render_page(self) -> str:
        result = await self.load_publications()
        return render_page(self.render_sections(), self.render_publications(result))

    def brain_graph(self, svg_path: Optional[Path] = None) -> Adjacency:
        """Adjacency of the configured brain logo; raises OSError if it cannot be read."""
        path = svg_path or self.config.brain_svg
        if path is None:
            raise FileNotFoundError("no brain SVG configured")
        return extract_graph(Path(path).read_text(encoding="utf-8"))


def publication_to_dict(publication: Publication) -> Dict[str, object]:
    return {
        "title": publication.title,
        "year": publication.year,
        "venue": publication.venue,
        "identifier": publication.identifier,
        "link": publication.link,
        "is_preprint": publication.is_preprint,
        "authors": list(publication.authors),
    }


def result_to_dict(result: PublicationsResult) -> Dict[str, object]:
    return {
        "publications": [publication_to_dict(pub) for pub in result.publications],
        "suppressed": [publication_to_dict(pub) for pub in result.suppressed],
        "error": result.error,
        "message": result.message,
    }


__all__ = ["HomepageApp", "publication_to_dict", "result_to_dict"]
