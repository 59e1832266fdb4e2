"""src/urlhelper/exceptions.py

UrlHelper Exceptions hierarchy.
"""


class UrlHelperError(Exception):
    """Base exception for all UrlHelper errors."""


class MalformedUrlError(UrlHelperError, ValueError):
    """
    The URL could not be split into parts.

    Raised when the authority is unusable, e.g. a port that is not a number
    or is out of range, or an unbalanced IPv6 bracket.
    """

    def __init__(self, url: str, reason: str = "Malformed URL"):
        super().__init__(f"{reason}: {url!r}")
        self.url = url
        self.reason = reason
