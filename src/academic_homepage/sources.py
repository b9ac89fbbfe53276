"""Bibliographic sources for the publications list."""
from __future__ import annotations

import json
import logging
from typing import Any, Awaitable, Callable, Dict, List, Optional

import httpx

from .config import SiteConfig
from .models import RawRecord

logger = logging.getLogger(__name__)

SEMANTIC_SCHOLAR_API = "https://api.semanticscholar.org/graph/v1"
SEMANTIC_SCHOLAR_FIELDS = "title,year,venue,externalIds,authors"
ORCID_API = "https://pub.orcid.org/v3.0"

Fetcher = Callable[[str, Optional[float]], Awaitable[str]]


class PublicationSourceError(RuntimeError):
    """Raised when a source cannot be reached or returns an unusable body."""


def _text(value: Any) -> Optional[str]:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def _year(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    return None


def _items(value: Any) -> List[Any]:
    return value if isinstance(value, list) else []


def _dig(data: Any, *keys: str) -> Any:
    for key in keys:
        if not isinstance(data, dict):
            return None
        data = data.get(key)
    return data


class PublicationSource:
    """Base class: one GET per load, JSON body mapped onto raw records."""

    name: str = "base"

    def __init__(
        self,
        fetcher: Optional[Fetcher] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.fetcher = fetcher or self._http_get
        self.timeout = timeout
        self.transport = transport

    def build_url(self) -> str:  # pragma: no cover - interface
        raise NotImplementedError

    def parse_payload(self, data: Dict[str, Any]) -> List[RawRecord]:  # pragma: no cover - interface
        raise NotImplementedError

    async def fetch_records(self) -> List[RawRecord]:
        url = self.build_url()
        try:
            payload = await self.fetcher(url, self.timeout)
        except httpx.HTTPError as exc:
            raise PublicationSourceError(f"{self.name} request failed: {exc}") from exc

        try:
            data = json.loads(payload)
        except ValueError as exc:
            raise PublicationSourceError(f"{self.name} returned invalid JSON") from exc

        if not isinstance(data, dict):
            logger.warning("%s returned a %s body, expected an object", self.name, type(data).__name__)
            return []

        records = self.parse_payload(data)
        logger.info("Fetched %s records from %s", len(records), self.name)
        return records

    async def _http_get(self, url: str, timeout: Optional[float]) -> str:
        options: Dict[str, Any] = {
            "headers": {"Accept": "application/json", "User-Agent": "academic-homepage/0.1"},
        }
        # without an explicit value httpx applies its own default timeout
        if timeout is not None:
            options["timeout"] = timeout
        if self.transport is not None:
            options["transport"] = self.transport
        async with httpx.AsyncClient(**options) as client:
            response = await client.get(url)
            response.raise_for_status()
            return response.text


class SemanticScholarSource(PublicationSource):
    """Papers of one author from the Semantic Scholar Graph API."""

    name = "semantic_scholar"

    def __init__(
        self,
        author_id: str,
        limit: int = 50,
        fetcher: Optional[Fetcher] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        super().__init__(fetcher=fetcher, timeout=timeout, transport=transport)
        self.author_id = author_id
        self.limit = limit

    def build_url(self) -> str:
        return (
            f"{SEMANTIC_SCHOLAR_API}/author/{self.author_id}/papers"
            f"?fields={SEMANTIC_SCHOLAR_FIELDS}&limit={self.limit}"
        )

    def parse_payload(self, data: Dict[str, Any]) -> List[RawRecord]:
        records: List[RawRecord] = []
        for item in _items(data.get("data")):
            if not isinstance(item, dict):
                continue
            authors = [
                author["name"].strip()
                for author in _items(item.get("authors"))
                if isinstance(author, dict) and _text(author.get("name"))
            ]
            records.append(
                RawRecord(
                    title=_text(item.get("title")),
                    year=_year(item.get("year")),
                    venue=_text(item.get("venue")),
                    identifier=_text(_dig(item, "externalIds", "DOI")),
                    authors=authors,
                )
            )
        return records


class OrcidSource(PublicationSource):
    """Works listed on a public ORCID record.

    ORCID work summaries carry no author list, so records from this source
    render without an author line.
    """

    name = "orcid"

    def __init__(
        self,
        orcid_id: str,
        fetcher: Optional[Fetcher] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        super().__init__(fetcher=fetcher, timeout=timeout, transport=transport)
        self.orcid_id = orcid_id

    def build_url(self) -> str:
        return f"{ORCID_API}/{self.orcid_id}/works"

    def parse_payload(self, data: Dict[str, Any]) -> List[RawRecord]:
        records: List[RawRecord] = []
        for group in _items(data.get("group")):
            summaries = _dig(group, "work-summary")
            if not isinstance(summaries, list) or not summaries:
                continue
            summary = summaries[0]
            records.append(
                RawRecord(
                    title=_text(_dig(summary, "title", "title", "value")),
                    year=_year(_dig(summary, "publication-date", "year", "value")),
                    venue=_text(_dig(summary, "journal-title", "value")),
                    identifier=self._doi(summary),
                )
            )
        return records

    @staticmethod
    def _doi(summary: Any) -> Optional[str]:
        external_ids = _dig(summary, "external-ids", "external-id")
        if not isinstance(external_ids, list):
            return None
        for external in external_ids:
            if _dig(external, "external-id-type") == "doi":
                return _text(_dig(external, "external-id-value"))
        return None


def build_source(
    config: SiteConfig, fetcher: Optional[Fetcher] = None
) -> PublicationSource:
    """Create the source selected in the site configuration."""
    if config.source == "orcid":
        return OrcidSource(config.orcid_id, fetcher=fetcher, timeout=config.request_timeout)
    return SemanticScholarSource(
        config.semantic_scholar_id,
        limit=config.result_limit,
        fetcher=fetcher,
        timeout=config.request_timeout,
    )


__all__ = [
    "PublicationSource",
    "PublicationSourceError",
    "SemanticScholarSource",
    "OrcidSource",
    "build_source",
]
