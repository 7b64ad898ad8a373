"""Filter and rank analysed entities into organization candidates."""

from __future__ import annotations

import logging
import re
import string

from analyze_article.models import ORGANIZATION, PERSON, Entity

logger = logging.getLogger(__name__)

MIN_SALIENCE = 0.005
MIN_WORD_LENGTH = 3
CANDIDATE_TYPES = {ORGANIZATION, PERSON}

_UPPERCASE_START = re.compile(r"[A-Z]")


def _name_words(name: str) -> list[str]:
    # Each raw token plus its punctuation-stripped form:
    # "BlackRock, Inc." -> ["blackrock,", "blackrock", "inc.", "inc"]
    words = []
    for word in name.lower().split():
        words.append(word)
        stripped = word.strip(string.punctuation)
        if stripped != word:
            words.append(stripped)
    return words


def is_organization_in_article(organization_name: str, article_text: str) -> bool:
    """Check whether any word of the name longer than three characters occurs in the text.

    Plain substring containment on lower-cased strings, without word
    boundaries, so "acme" also matches inside "acmeville".
    """
    text_lower = article_text.lower()
    return any(
        len(word) > MIN_WORD_LENGTH and word in text_lower
        for word in _name_words(organization_name)
    )


def filter_entities(entities: list[Entity], article_text: str) -> list[str]:
    """
    Reduce analysed entities to ranked candidate names.

    Steps, in order:
    1. salience above MIN_SALIENCE
    2. ORGANIZATION or PERSON type
    3. name starts with an uppercase ASCII letter
    4. name occurs in the article (is_organization_in_article)
    5. sort by salience, highest first (stable for ties)
    6. keep only the names
    """
    candidates = [e for e in entities if e.salience is not None and e.salience > MIN_SALIENCE]
    candidates = [e for e in candidates if e.type in CANDIDATE_TYPES]
    candidates = [e for e in candidates if _UPPERCASE_START.match(e.name or "")]
    candidates = [e for e in candidates if is_organization_in_article(e.name or "", article_text)]
    candidates = sorted(candidates, key=lambda e: e.salience, reverse=True)

    names = [e.name for e in candidates]
    logger.info("Kept %d of %d entities as organization candidates", len(names), len(entities))
    return names
