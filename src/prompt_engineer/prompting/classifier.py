"""Keyword-based classification of free-form ideas."""

import re
from typing import Dict, Tuple

from .types import Classification


# Checked in this order; the first family with a hit wins.
KEYWORDS: Dict[Classification, Tuple[str, ...]] = {
    Classification.UI_UX: ("ui", "ux", "user interface", "design"),
    Classification.APP_DEV: ("app", "application", "mobile", "development"),
    Classification.WEB_DEV: ("web", "website", "frontend", "backend"),
}

# Keywords this short must start a word ("build" is not "ui", "happy" is not "app").
# The cost is that a short keyword inside a longer word no longer counts, so
# "guide" does not match "ui" the way a plain substring test would.
_SHORT_KEYWORD_LENGTH = 3


def _contains(text: str, keyword: str) -> bool:
    if len(keyword) <= _SHORT_KEYWORD_LENGTH:
        return re.search(r"\b" + re.escape(keyword), text) is not None
    return keyword in text


def classify(text: str) -> Classification:
    """Return the first matching topic for ``text``, or ``Classification.NONE``."""
    normalized = text.lower()
    for classification, keywords in KEYWORDS.items():
        if any(_contains(normalized, keyword) for keyword in keywords):
            return classification
    return Classification.NONE
