"""FastAPI interface serving the homepage.

Run with:
    uvicorn academic_homepage.web:app --reload
"""
from __future__ import annotations

from typing import Any, Dict, List
from xml.etree.ElementTree import ParseError

from fastapi import FastAPI, HTTPException
from fastapi.responses import HTMLResponse

from .app import HomepageApp, result_to_dict
from .config import load_config
from .content import get_section, load_section

app = FastAPI(title="Academic Homepage", description="Personal homepage with a live publication list")


def _build_homepage() -> HomepageApp:
    return HomepageApp(config=load_config())


@app.get("/", response_class=HTMLResponse)
async def home() -> HTMLResponse:
    """Serve the full page with all drawer sections rendered."""

    homepage = _build_homepage()
    return HTMLResponse(await homepage.render_page())


@app.get("/publications", response_class=HTMLResponse)
async def publications() -> HTMLResponse:
    """Serve only the publications container markup."""

    homepage = _build_homepage()
    result = await homepage.load_publications()
    return HTMLResponse(homepage.render_publications(result))


@app.get("/sections/{name}", response_class=HTMLResponse)
async def section(name: str) -> HTMLResponse:
    content_section = get_section(name)
    if content_section is None:
        raise HTTPException(status_code=404, detail=f"Unknown section: {name}")
    homepage = _build_homepage()
    return HTMLResponse(load_section(homepage.config.content_dir, content_section))


@app.get("/api/publications")
async def publications_json() -> Dict[str, Any]:
    """Reconciled publications plus the preprints that were suppressed."""

    homepage = _build_homepage()
    result = await homepage.load_publications()
    return result_to_dict(result)


@app.get("/api/brain-graph")
async def brain_graph() -> Dict[str, List[List[int]]]:
    homepage = _build_homepage()
    try:
        adjacency = homepage.brain_graph()
    except OSError as exc:
        raise HTTPException(status_code=404, detail="Brain graph not available") from exc
    except ParseError as exc:
        raise HTTPException(status_code=422, detail=f"Brain SVG could not be parsed: {exc}") from exc
    return {"adjacency": adjacency}


def main() -> None:
    """Run the FastAPI app using uvicorn."""

    import uvicorn

    uvicorn.run("academic_homepage.web:app", host="0.0.0.0", port=8000, reload=False)


__all__ = ["app", "main"]
