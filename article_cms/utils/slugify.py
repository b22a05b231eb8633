import re

from unidecode import unidecode

_NON_SLUG_CHARS = re.compile(r"[^a-z0-9]+")


def slugify(text: str) -> str:
    """ASCII, lower-case, hyphen-separated slug for article URLs."""
    return _NON_SLUG_CHARS.sub("-", unidecode(text or "").lower()).strip("-")
