"""
Compare XML and HTML markup trees for equivalence.

Copyright 2022-2026, Levente Hunyadi
"""

import re

# non-breaking space and other Unicode spaces are content, not layout
_WHITESPACE_CHARS = " \t\n\r\f\v"
_WHITESPACE = re.compile(f"[{re.escape(_WHITESPACE_CHARS)}]+")


def collapse(text: str | None) -> str:
    """
    Strips leading and trailing whitespace, and collapses internal whitespace.

    Runs of spaces, tabs and line breaks are replaced with a single space.

    :param text: Text or comment content, `None` is treated as empty.
    :returns: Collapsed text.
    """

    if text is None:
        return ""
    return _WHITESPACE.sub(" ", text.strip(_WHITESPACE_CHARS))


def normalize(text: str | None, collapse_whitespace: bool) -> str:
    "Returns text as it takes part in comparison."

    if collapse_whitespace:
        return collapse(text)
    return text or ""
