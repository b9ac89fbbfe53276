"""Normalization helpers turning raw source records into publications."""
from __future__ import annotations

import re
from typing import Optional

from .models import Publication, RawRecord

DEFAULT_TITLE = "Untitled"
DEFAULT_VENUE = "Preprint"

# bioRxiv and medRxiv both register DOIs under the Cold Spring Harbor prefix.
PREPRINT_DOI_PREFIXES = ("10.1101/",)
PREPRINT_VENUE_PATTERN = re.compile(r"biorxiv", re.IGNORECASE)


def normalize_identifier(value: Optional[str]) -> Optional[str]:
    """Strip resolver and ``doi:`` prefixes from a DOI-like identifier."""
    if not value:
        return None
    doi = value.strip()
    doi = re.sub(r"^https?://(dx\.)?doi\.org/", "", doi, flags=re.IGNORECASE)
    doi = re.sub(r"^doi:\s*", "", doi, flags=re.IGNORECASE)
    return doi or None


def is_preprint(identifier: Optional[str], venue: Optional[str]) -> bool:
    """Return True when the identifier or venue points at a preprint server."""
    if identifier and identifier.startswith(PREPRINT_DOI_PREFIXES):
        return True
    return bool(venue and PREPRINT_VENUE_PATTERN.search(venue))


def normalize_record(record: RawRecord) -> Publication:
    """Build a Publication from a raw record, defaulting missing fields."""
    identifier = normalize_identifier(record.identifier)
    return Publication(
        title=record.title or DEFAULT_TITLE,
        venue=record.venue or DEFAULT_VENUE,
        year=record.year or None,
        identifier=identifier,
        # classification looks at the venue as received, before defaulting
        is_preprint=is_preprint(identifier, record.venue),
        authors=tuple(name for name in record.authors if name),
    )


def shorten_name(full_name: str) -> str:
    """Abbreviate all but the last name component to initials.

    ``"Jane Ann Smith"`` becomes ``"J. A. Smith"``. Single-component names are
    returned unchanged.
    """
    parts = full_name.strip().split()
    if len(parts) < 2:
        return full_name
    initials = " ".join(f"{part[0]}." for part in parts[:-1])
    return f"{initials} {parts[-1]}"
