"""Site configuration and the page owner's identity."""
from __future__ import annotations

import json
import os
import re
from pathlib import Path
from typing import Dict, List, Literal, Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

DEFAULT_CO_FIRST_AUTHORS: Dict[str, List[str]] = {
    "10.1101/2025.03.14.643363": ["Boulanger-Weill", "Kämpf"],
}

_UMLAUT_VARIANTS = {
    "ä": "(?:ä|ae?)",
    "ö": "(?:ö|oe?)",
    "ü": "(?:ü|ue?)",
}


def _surname_regex(surname: str) -> str:
    return "".join(_UMLAUT_VARIANTS.get(ch.lower(), re.escape(ch)) for ch in surname)


class OwnerIdentity:
    """Recognizes the page owner in formatted author names.

    The surname is matched case-insensitively and tolerates transliterated
    umlauts, so ``Kämpf`` also matches ``Kaempf`` and ``Kampf``.
    """

    def __init__(self, surname: str, initials: str = ""):
        self.surname = surname
        self.initials = initials
        surname_re = _surname_regex(surname)
        letters = [ch for ch in initials if ch.isalpha()]
        prefix = "".join(rf"{re.escape(ch)}\.\s*" for ch in letters)
        if letters:
            # the source data sometimes repeats an initial ("F. F.")
            repeat = "".join(re.escape(ch) for ch in dict.fromkeys(letters))
            prefix = rf"(?-i:{prefix}(?:[{repeat}]\.\s*)?)"
        self.surname_pattern = re.compile(surname_re, re.IGNORECASE)
        self.display_pattern = re.compile(rf"({prefix}{surname_re}\*?)", re.IGNORECASE)

    def matches(self, name: str) -> bool:
        return bool(self.surname_pattern.search(name))

    def emphasize(self, text: str) -> str:
        return self.display_pattern.sub(r"<strong>\1</strong>", text)


class SiteConfig(BaseModel):
    """Settings for one homepage build."""

    source: Literal["semantic_scholar", "orcid"] = "semantic_scholar"
    semantic_scholar_id: str = "2350578684"
    orcid_id: str = "0009-0001-7036-4729"
    result_limit: int = Field(50, ge=1, le=1000)
    request_timeout: Optional[float] = Field(None, gt=0)
    content_dir: Path = Path("content")
    brain_svg: Optional[Path] = None
    owner_surname: str = "Kämpf"
    owner_initials: str = "F."
    co_first_authors: Dict[str, List[str]] = Field(
        default_factory=lambda: {doi: list(names) for doi, names in DEFAULT_CO_FIRST_AUTHORS.items()}
    )

    @field_validator("source", mode="before")
    @classmethod
    def normalize_source(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower().replace("-", "_")
        return value

    @field_validator("owner_surname")
    @classmethod
    def require_surname(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("owner_surname must not be empty")
        return value.strip()

    def owner(self) -> OwnerIdentity:
        return OwnerIdentity(self.owner_surname, self.owner_initials)


_ENV_FIELDS = {
    "HOMEPAGE_SOURCE": "source",
    "HOMEPAGE_SEMANTIC_SCHOLAR_ID": "semantic_scholar_id",
    "HOMEPAGE_ORCID_ID": "orcid_id",
    "HOMEPAGE_RESULT_LIMIT": "result_limit",
    "HOMEPAGE_REQUEST_TIMEOUT": "request_timeout",
    "HOMEPAGE_CONTENT_DIR": "content_dir",
    "HOMEPAGE_BRAIN_SVG": "brain_svg",
    "HOMEPAGE_OWNER_SURNAME": "owner_surname",
    "HOMEPAGE_OWNER_INITIALS": "owner_initials",
}


def load_config(env: Optional[Mapping[str, str]] = None) -> SiteConfig:
    """Build a SiteConfig from ``HOMEPAGE_*`` variables (and a ``.env`` file)."""
    if env is None:
        load_dotenv()
        env = os.environ

    values: Dict[str, object] = {}
    for key, field_name in _ENV_FIELDS.items():
        raw = env.get(key)
        if raw is not None and raw.strip():
            values[field_name] = raw.strip()

    co_first = env.get("HOMEPAGE_CO_FIRST_AUTHORS")
    if co_first:
        try:
            values["co_first_authors"] = json.loads(co_first)
        except json.JSONDecodeError as exc:
            raise ValueError(f"HOMEPAGE_CO_FIRST_AUTHORS is not valid JSON: {exc}") from exc

    return SiteConfig(**values)


__all__ = ["OwnerIdentity", "SiteConfig", "load_config", "DEFAULT_CO_FIRST_AUTHORS"]
