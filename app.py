from __future__ import annotations

import asyncio
import sys
from pathlib import Path
from typing import Dict, List

import pandas as pd
import streamlit as st

ROOT = Path(__file__).resolve().parent
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from academic_homepage.app import HomepageApp  # noqa: E402
from academic_homepage.config import load_config  # noqa: E402
from academic_homepage.matcher import ExactTitleMatcher, TokenOverlapMatcher  # noqa: E402
from academic_homepage.models import Publication, PublicationsResult  # noqa: E402


SOURCE_OPTIONS = {
    "Semantic Scholar": "semantic_scholar",
    "ORCID": "orcid",
}


def _rows(publications: List[Publication], status: str) -> List[Dict[str, object]]:
    return [
        {
            "Year": pub.year or "",
            "Title": pub.title,
            "Venue": pub.venue,
            "Preprint": "Yes" if pub.is_preprint else "No",
            "Authors": len(pub.authors),
            "Status": status,
            "Link": pub.link or "",
        }
        for pub in publications
    ]


def _load(source_key: str, strict_titles: bool) -> tuple[HomepageApp, PublicationsResult]:
    config = load_config().model_copy(update={"source": source_key})
    matcher = ExactTitleMatcher() if strict_titles else TokenOverlapMatcher()
    homepage = HomepageApp(config=config, matcher=matcher)
    return homepage, asyncio.run(homepage.load_publications())


def main() -> None:
    st.set_page_config(page_title="Publication Preview", layout="wide")
    st.title("Publication Preview")
    st.caption(
        "Fetch the publication list and check which preprints are hidden behind their published versions."
    )

    source_label = st.selectbox("Bibliographic source", list(SOURCE_OPTIONS.keys()), index=0)
    strict_titles = st.checkbox(
        "Strict title matching",
        value=False,
        help="Only hide a preprint when its title equals a published title exactly.",
    )

    if st.button("Fetch publications"):
        homepage, result = _load(SOURCE_OPTIONS[source_label], strict_titles)
        if not result.ok:
            st.warning(result.message or "Unable to load publications.")
            return

        rows = _rows(result.publications, "Shown") + _rows(result.suppressed, "Suppressed")
        df = pd.DataFrame(rows)
        st.metric("Shown", len(result.publications))
        st.metric("Suppressed preprints", len(result.suppressed))
        st.dataframe(
            df,
            use_container_width=True,
            column_config={"Link": st.column_config.LinkColumn("Link")},
            hide_index=True,
        )

        st.divider()
        st.subheader("Rendered list")
        st.markdown(homepage.render_publications(result), unsafe_allow_html=True)


if __name__ == "__main__":
    main()
