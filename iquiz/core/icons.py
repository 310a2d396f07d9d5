"""Map free-text topic titles to the fixed set of icon keys."""

from __future__ import annotations

UNKNOWN_ICON = "questionmark.circle"

# Checked in order, first match wins. The first rule shadows the "science"
# keyword of the third.
_ICON_RULES: tuple[tuple[tuple[str, ...], str], ...] = (
    (("math", "science"), "function"),
    (("marvel", "hero", "comic"), "bolt.fill"),
    (("science", "physics", "chemistry"), "atom"),
    (("history", "world"), "book.fill"),
    (("movie", "film", "tv"), "tv.fill"),
    (("music", "song"), "music.note"),
    (("sport", "game"), "sportscourt.fill"),
)


def icon_for(title: str) -> str:
    """Return the icon key for ``title`` using case-insensitive keyword matching."""
    lowered = title.lower()
    for keywords, icon_key in _ICON_RULES:
        if any(keyword in lowered for keyword in keywords):
            return icon_key
    return UNKNOWN_ICON
