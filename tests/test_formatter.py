from academic_homepage.config import OwnerIdentity
from academic_homepage.formatter import AuthorListFormatter
from academic_homepage.models import Publication

OWNER = OwnerIdentity("Kämpf", "F.")

TEN_AUTHORS = [
    "Alice Adams",
    "Bob Brown",
    "Florian Kämpf",
    "Dana Diaz",
    "Eve Evans",
    "Finn Fischer",
    "Gina Gray",
    "Hugo Hart",
    "Iris Ingram",
    "Jonas Jones",
]


def _pub(authors, identifier=None):
    return Publication(title="T", venue="V", identifier=identifier, authors=tuple(authors))


def test_names_are_shortened_to_initials():
    formatter = AuthorListFormatter(OWNER)

    assert formatter.display_names(_pub(["Jane Ann Lee", "Consortium"])) == ["J. A. Lee", "Consortium"]


def test_long_list_is_truncated_after_owner():
    formatter = AuthorListFormatter(OWNER)

    names = formatter.display_names(_pub(TEN_AUTHORS))

    assert names == ["A. Adams", "B. Brown", "F. Kämpf", "...", "I. Ingram", "J. Jones"]
    assert len([name for name in names if name != "..."]) == 5


def test_owner_near_the_end_disables_truncation():
    authors = TEN_AUTHORS[:2] + TEN_AUTHORS[3:8] + ["Florian Kämpf"] + TEN_AUTHORS[8:]

    names = AuthorListFormatter(OWNER).display_names(_pub(authors))

    assert len(names) == 10
    assert "..." not in names


def test_short_list_is_never_truncated():
    authors = TEN_AUTHORS[:8]

    assert len(AuthorListFormatter(OWNER).display_names(_pub(authors))) == 8


def test_list_without_owner_is_not_truncated():
    authors = [name for name in TEN_AUTHORS if "Kämpf" not in name] + ["Karl Kurz"]

    assert "..." not in AuthorListFormatter(OWNER).display_names(_pub(authors))


def test_co_first_asterisk_depends_on_identifier():
    formatter = AuthorListFormatter(OWNER, {"X": ["Smith", "Lee"]})

    assert formatter.display_names(_pub(["Jane Lee"], identifier="X")) == ["J. Lee*"]
    assert formatter.display_names(_pub(["Jane Lee"], identifier="Y")) == ["J. Lee"]
    assert formatter.display_names(_pub(["Jane Lee"])) == ["J. Lee"]


def test_owner_is_emphasized_with_asterisk():
    formatter = AuthorListFormatter(OWNER, {"10.1101/x": ["Boulanger-Weill", "Kämpf"]})

    line = formatter.format(_pub(["Jonathan Boulanger-Weill", "Florian Kämpf", "Armin Bahl"], "10.1101/x"))

    assert line == "J. Boulanger-Weill*, <strong>F. Kämpf*</strong>, A. Bahl"


def test_owner_spelling_variants_are_recognized():
    formatter = AuthorListFormatter(OWNER)

    assert formatter.format(_pub(["Florian Kaempf", "Jane Lee"])) == "<strong>F. Kaempf</strong>, J. Lee"
    assert formatter.format(_pub(["Florian Kampf"])) == "<strong>F. Kampf</strong>"


def test_empty_author_list_formats_to_empty_string():
    assert AuthorListFormatter(OWNER).format(_pub([])) == ""


def test_author_names_are_html_escaped():
    line = AuthorListFormatter(OWNER).format(_pub(["Jane <b>Lee</b>"]))

    assert "<b>" not in line
