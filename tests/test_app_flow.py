import asyncio
import logging

import httpx

from academic_homepage.app import HomepageApp, result_to_dict
from academic_homepage.models import RawRecord
from academic_homepage.sources import SemanticScholarSource
from conftest import make_fetcher


def test_load_publications_reconciles_and_sorts(site_config, fake_source):
    app = HomepageApp(config=site_config, source=fake_source)

    result = asyncio.run(app.load_publications())

    assert result.ok
    assert [pub.year for pub in result.publications] == [2024, 2021]
    assert [pub.venue for pub in result.suppressed] == ["bioRxiv"]


def test_rendered_publications_emphasize_owner(site_config, fake_source):
    app = HomepageApp(config=site_config, source=fake_source)

    html = app.render_publications(asyncio.run(app.load_publications()))

    assert html.count('<article class="publication">') == 2
    assert "<strong>F. Kämpf</strong>" in html
    assert "https://doi.org/10.1038/s41593-024-00001" in html
    assert "larval zebrafish brain" in html


def test_empty_result_shows_message(site_config, caplog):
    source = SemanticScholarSource("1", fetcher=make_fetcher({"data": []}))
    app = HomepageApp(config=site_config, source=source)

    with caplog.at_level(logging.WARNING, logger="academic_homepage.app"):
        result = asyncio.run(app.load_publications())

    assert result.error == "empty"
    assert app.render_publications(result) == "<p>No publications found.</p>"
    assert any("No publications" in record.message for record in caplog.records)


def test_fetch_failure_shows_message_and_logs(site_config, caplog):
    source = SemanticScholarSource("1", fetcher=make_fetcher(httpx.ConnectError("offline")))
    app = HomepageApp(config=site_config, source=source)

    with caplog.at_level(logging.ERROR, logger="academic_homepage.app"):
        result = asyncio.run(app.load_publications())

    assert not result.ok
    assert result.publications == []
    assert app.render_publications(result) == "<p>Unable to load publications. Please try again later.</p>"
    assert any(record.levelno == logging.ERROR for record in caplog.records)


def test_reconcile_applies_co_first_registry(site_config, fake_source):
    app = HomepageApp(config=site_config, source=fake_source)
    kept, _ = app.reconcile(
        [
            RawRecord(
                title="Dissecting an evidence integrator circuit",
                year=2025,
                venue="bioRxiv",
                identifier="10.1101/2025.03.14.643363",
                authors=["Jonathan Boulanger-Weill", "Florian Kämpf", "Armin Bahl"],
            )
        ]
    )

    line = app.author_formatter.format(kept[0])

    assert line == "J. Boulanger-Weill*, <strong>F. Kämpf*</strong>, A. Bahl"


def test_result_to_dict_includes_suppressed(site_config, fake_source):
    app = HomepageApp(config=site_config, source=fake_source)

    data = result_to_dict(asyncio.run(app.load_publications()))

    assert len(data["publications"]) == 2
    assert data["suppressed"][0]["is_preprint"] is True
    assert data["error"] is None


def test_render_page_includes_sections_and_publications(site_config, fake_source):
    app = HomepageApp(config=site_config, source=fake_source)

    page = asyncio.run(app.render_page())

    assert "<h2>Research</h2>" in page
    assert "<h2>Talks & Posters</h2>" in page
    assert 'id="publications-list"' in page


def test_malformed_containers_degrade_to_empty_message(site_config):
    source = SemanticScholarSource("1", fetcher=make_fetcher({"data": [{"title": "A", "authors": 5}]}))
    app = HomepageApp(config=site_config, source=source)

    result = asyncio.run(app.load_publications())

    assert result.ok
    assert [pub.title for pub in result.publications] == ["A"]

    empty = HomepageApp(config=site_config, source=SemanticScholarSource("1", fetcher=make_fetcher({"data": 5})))
    assert asyncio.run(empty.load_publications()).error == "empty"
