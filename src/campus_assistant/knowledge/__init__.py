"""Campus knowledge base: canned responses and the keyword matcher."""

from .loader import CampusDataError, load_builtin_campus_data, load_campus_data, parse_campus_data
from .matcher import KeywordMatcher, find_relevant_info
from .models import GENERAL_CATEGORY, CampusData, MatchResult, QuickAction

__all__ = [
    "GENERAL_CATEGORY",
    "CampusData",
    "CampusDataError",
    "KeywordMatcher",
    "MatchResult",
    "QuickAction",
    "find_relevant_info",
    "load_builtin_campus_data",
    "load_campus_data",
    "parse_campus_data",
]
