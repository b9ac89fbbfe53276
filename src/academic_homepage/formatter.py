"""Author-list formatting for publication entries."""
from __future__ import annotations

import html
from typing import Iterable, List, Mapping, Optional, Sequence

from .config import OwnerIdentity
from .models import FormattedAuthor, Publication
from .normalization import shorten_name

ELLIPSIS = "..."
SEPARATOR = ", "


class AuthorListFormatter:
    """Shorten, tag and truncate author lists.

    Long consortium author lists are cut after the page owner, keeping the
    final two authors so the senior author stays visible.
    """

    truncate_above = 8
    tail_size = 2
    owner_tail_window = 3

    def __init__(
        self,
        owner: OwnerIdentity,
        co_first_authors: Optional[Mapping[str, Sequence[str]]] = None,
    ):
        self.owner = owner
        self.co_first_authors = co_first_authors or {}

    def co_first_for(self, publication: Publication) -> List[str]:
        if not publication.identifier:
            return []
        return list(self.co_first_authors.get(publication.identifier, []))

    @staticmethod
    def format_name(full_name: str, co_first_names: Iterable[str] = ()) -> FormattedAuthor:
        parts = full_name.strip().split()
        if len(parts) < 2:
            return FormattedAuthor(full_name=full_name, display_name=full_name)
        last_name = parts[-1]
        return FormattedAuthor(
            full_name=full_name,
            display_name=shorten_name(full_name),
            co_first=last_name in set(co_first_names),
        )

    def owner_index(self, names: Sequence[str]) -> int:
        for index, name in enumerate(names):
            if self.owner.matches(name):
                return index
        return -1

    def shorten_list(self, names: List[str]) -> List[str]:
        """Apply the owner-centred truncation rule to already formatted names."""
        index = self.owner_index(names)
        if (
            index >= 0
            and len(names) > self.truncate_above
            and index < len(names) - self.owner_tail_window
        ):
            return names[: index + 1] + [ELLIPSIS] + names[-self.tail_size :]
        return names

    def display_names(self, publication: Publication) -> List[str]:
        co_first = self.co_first_for(publication)
        names = [str(self.format_name(name, co_first)) for name in publication.authors]
        return self.shorten_list(names)

    def format(self, publication: Publication) -> str:
        """Return the HTML author line, or an empty string when there are no authors."""
        if not publication.authors:
            return ""
        joined = SEPARATOR.join(html.escape(name) for name in self.display_names(publication))
        return self.owner.emphasize(joined)


__all__ = ["AuthorListFormatter", "ELLIPSIS", "SEPARATOR"]
