"""GitHub-style slug generation for heading anchors"""

import re


def slugify(text: str) -> str:
    """Convert heading text to a lowercase, hyphen-separated anchor slug.

    Punctuation is dropped and each whitespace character becomes one hyphen,
    matching the ids GitHub assigns to rendered headings.
    """
    text = text.strip().lower()
    text = re.sub(r'[^\w\s-]', '', text)
    return re.sub(r'\s', '-', text)


class Slugger:
    """Issue unique slugs within one document; repeats get -1, -2, ... suffixes."""

    def __init__(self):
        self._seen: set[str] = set()
        self._occurrences: dict[str, int] = {}

    def slug(self, text: str) -> str:
        base = slugify(text)
        if not base:
            return base
        candidate = base
        while candidate in self._seen:
            self._occurrences[base] = self._occurrences.get(base, 0) + 1
            candidate = f"{base}-{self._occurrences[base]}"
        self._seen.add(candidate)
        return candidate
