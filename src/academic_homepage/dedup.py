"""Preprint suppression and chronological ordering."""
from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Tuple

from .matcher import TitleMatcher, TokenOverlapMatcher
from .models import Publication

logger = logging.getLogger(__name__)


def partition_duplicates(
    publications: Iterable[Publication], matcher: Optional[TitleMatcher] = None
) -> Tuple[List[Publication], List[Publication]]:
    """Split publications into (kept, suppressed).

    A preprint is suppressed when its title matches any published record.
    Published records are never compared with each other, and preprints are
    never compared with other preprints. Input order is preserved in both lists.
    """
    matcher = matcher or TokenOverlapMatcher()
    items = list(publications)
    published_titles = [pub.title for pub in items if not pub.is_preprint]

    kept: List[Publication] = []
    suppressed: List[Publication] = []
    for pub in items:
        if pub.is_preprint and any(
            matcher.is_same_work(pub.title, title) for title in published_titles
        ):
            logger.debug("Suppressing preprint with published version: %s", pub.title)
            suppressed.append(pub)
            continue
        kept.append(pub)
    return kept, suppressed


def deduplicate(
    publications: Iterable[Publication], matcher: Optional[TitleMatcher] = None
) -> List[Publication]:
    kept, _ = partition_duplicates(publications, matcher)
    return kept


def sort_publications(publications: Iterable[Publication]) -> List[Publication]:
    """Order by year, newest first; undated entries go last, ties keep input order."""
    return sorted(publications, key=lambda pub: pub.sort_year, reverse=True)
