"""Personal academic homepage with a reconciled publication list."""

from .app import HomepageApp
from .config import OwnerIdentity, SiteConfig, load_config
from .dedup import deduplicate, partition_duplicates, sort_publications
from .formatter import AuthorListFormatter
from .matcher import ExactTitleMatcher, TitleMatcher, TokenOverlapMatcher
from .models import FormattedAuthor, Publication, PublicationsResult, RawRecord
from .normalization import normalize_record
from .sources import OrcidSource, PublicationSourceError, SemanticScholarSource

__all__ = [
    "HomepageApp",
    "OwnerIdentity",
    "SiteConfig",
    "load_config",
    "deduplicate",
    "partition_duplicates",
    "sort_publications",
    "AuthorListFormatter",
    "ExactTitleMatcher",
    "TitleMatcher",
    "TokenOverlapMatcher",
    "FormattedAuthor",
    "Publication",
    "PublicationsResult",
    "RawRecord",
    "normalize_record",
    "OrcidSource",
    "PublicationSourceError",
    "SemanticScholarSource",
]
