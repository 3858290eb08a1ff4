"""Filter, vocabulary and pagination over loaded rosters."""

from .filtering import FilterCriteria, FilterVocabulary, extract_vocabulary, filter_players
from .paging import Page, PageOutOfRange, clamp_page, paginate, total_pages
from .browser import RosterBrowser

__all__ = [
    "FilterCriteria",
    "FilterVocabulary",
    "Page",
    "PageOutOfRange",
    "RosterBrowser",
    "clamp_page",
    "extract_vocabulary",
    "filter_players",
    "paginate",
    "total_pages",
]
