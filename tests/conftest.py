import json
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT / "src") not in sys.path:
    sys.path.insert(0, str(ROOT / "src"))

import pytest

from academic_homepage.config import SiteConfig
from academic_homepage.sources import SemanticScholarSource


def make_fetcher(payload, calls=None):
    """Return an async fetcher serving ``payload`` (dict/list are JSON-encoded)."""

    async def fetch(url, _timeout):
        if calls is not None:
            calls.append(url)
        if isinstance(payload, Exception):
            raise payload
        if isinstance(payload, str):
            return payload
        return json.dumps(payload)

    return fetch


@pytest.fixture()
def semantic_scholar_payload() -> dict:
    """Author papers response mirroring the Semantic Scholar Graph API shape."""

    return {
        "data": [
            {
                "paperId": "a1",
                "title": "Neural circuit mapping in larval zebrafish",
                "year": 2023,
                "venue": "bioRxiv",
                "externalIds": {"DOI": "10.1101/2023.01.01.000001"},
                "authors": [{"name": "Jane Lee"}, {"name": "Florian Kämpf"}],
            },
            {
                "paperId": "a2",
                "title": "Neural circuit mapping in the larval zebrafish brain",
                "year": 2024,
                "venue": "Nature Neuroscience",
                "externalIds": {"DOI": "10.1038/s41593-024-00001"},
                "authors": [{"name": "Jane Lee"}, {"name": "Florian Kämpf"}],
            },
            {
                "paperId": "a3",
                "title": "Contest behaviour in cichlids",
                "year": 2021,
                "venue": "Behavioral Ecology",
                "externalIds": {},
                "authors": [{"name": "Florian Kämpf"}, {"name": "Alex Jordan"}],
            },
        ]
    }


@pytest.fixture()
def site_config(tmp_path: Path) -> SiteConfig:
    return SiteConfig(content_dir=tmp_path / "content")


@pytest.fixture()
def fake_source(semantic_scholar_payload):
    return SemanticScholarSource("2350578684", fetcher=make_fetcher(semantic_scholar_payload))


@pytest.fixture()
def brain_svg_text() -> str:
    """Three somas: node 0 linked to nodes 1 and 2."""

    return """
    <svg xmlns="http://www.w3.org/2000/svg">
      <g id="somas">
        <g transform="matrix(0.01,0,0,0.01,0,0)"><ellipse /></g>
        <g transform="matrix(0.01,0,0,0.01,100,0)"><ellipse /></g>
        <g transform="matrix(0.01,0,0,0.01,0,100)"><ellipse /></g>
      </g>
      <g id="striche">
        <path d="M5,3L104,3" />
        <path d="M5,4L5,103" />
      </g>
    </svg>
    """
