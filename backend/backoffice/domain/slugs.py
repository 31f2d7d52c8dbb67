"""Slug derivation from article titles and the reverse, human-readable label."""

import html
import re
import unicodedata

_STRIPPED_PUNCTUATION = re.compile(r"""[*+~.()'"!:@]""")
_DISALLOWED = re.compile(r"[^\w\s$-]+")
_SEPARATORS = re.compile(r"[-\s]+")


def derive_slug(title: str) -> str:
    """Turn a title into a URL-safe slug.

    Diacritics are folded (``é`` → ``e``), the punctuation set
    ``* + ~ . ( ) ' " ! : @`` is dropped, runs of whitespace and hyphens
    become a single hyphen and the result is lower-cased. A title made only
    of punctuation yields an empty string::

        >>> derive_slug("Wash the Sins!")
        'wash-the-sins'
    """
    decomposed = unicodedata.normalize("NFKD", title)
    folded = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    cleaned = _DISALLOWED.sub("", _STRIPPED_PUNCTUATION.sub("", folded))
    return _SEPARATORS.sub("-", cleaned).strip("-").lower()


def humanize_slug(slug: str) -> str:
    """Readable label for a slug: hyphens become spaces, markup is escaped."""
    return html.escape(slug.replace("-", " "))
