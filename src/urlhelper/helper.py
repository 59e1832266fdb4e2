"""src/urlhelper/helper.py

Immutable URL wrapper.
"""

from typing import Any, Dict, Optional, Union

from urlhelper.expression import DEFAULT_EXPRESSION, render
from urlhelper.parts import Part, UrlParts, parse_url

__all__ = ["UrlHelper", "url"]


class UrlHelper:
    """
    Wrapper for a URL string.

    Finds out about a URL, gets single parts of it, and extracts parts of it
    into a new URL. UrlHelpers are immutable: ``str()`` gives back the
    (whitespace-trimmed) string passed to the constructor, and every derived
    URL is a new instance.

    Parts are parsed on first use, so a malformed URL raises
    :class:`~urlhelper.exceptions.MalformedUrlError` from the first method
    that reads them rather than from the constructor.
    """

    __slots__ = ("_url", "_parts")

    def __init__(self, url: str):
        object.__setattr__(self, "_url", url.strip())
        object.__setattr__(self, "_parts", None)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"'{self.__class__.__name__}' object is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"'{self.__class__.__name__}' object is immutable")

    def __reduce__(self):
        return (self.__class__, (self._url,))

    @property
    def parts(self) -> UrlParts:
        """Parsed parts, computed once."""
        parts: Optional[UrlParts] = self._parts
        if parts is None:
            parts = parse_url(self._url)
            object.__setattr__(self, "_parts", parts)
        return parts

    def get_parts(self) -> Dict[str, Union[str, int]]:
        """
        Return the URL as a dict of parts.

        Keys are 'scheme', 'user', 'pass', 'host', 'port', 'dir', 'file',
        'ext', 'query' and 'fragment'. Missing parts are '' (port: 0).
        """
        return self.parts.as_dict()

    def is_absolute(self) -> bool:
        """Return True if this URL has a host."""
        return bool(self.parts.host)

    def is_root_relative(self) -> bool:
        """Return True if this URL has no host and its path starts with '/'."""
        return not self.is_absolute() and self.parts.path.startswith("/")

    def is_context_relative(self) -> bool:
        """
        Return True if this URL is relative to the page it appears on.

        Examples: 'foo.html', './bar.html', 'foo/bar/'. The empty URL is
        context-relative too.
        """
        return not self.is_absolute() and not self.is_root_relative()

    def get(self, expression: str = DEFAULT_EXPRESSION) -> "UrlHelper":
        """
        Build a new URL from the parts named in ``expression``.

        The new URL holds the parts that are both in the expression and in
        this URL. The scheme is written lowercase, so the result can differ
        in case from the input; every other part keeps its case.

        Args:
            expression: Dot-separated part names, e.g. 'base.dir.file.ext'.
                'base' is shorthand for 'scheme.user.pass.host.port'.

        Returns:
            New UrlHelper.
        """
        return self.__class__(render(self.parts, expression))

    def get_part(self, name: str) -> str:
        """
        Return a single part of this URL, without decoration.

        ``name`` is one of the part names; 'base' is not accepted here, use
        :meth:`get` for that. Unknown names and missing parts give ''.
        """
        try:
            part = Part(name)
        except ValueError:
            return ""
        value = self.parts.value(part)
        return str(value) if value else ""

    def get_context_part(self) -> "UrlHelper":
        """
        Same as ``get('base.dir')`` but always ending in exactly one '/'.

        Context-relative URLs can be appended to it.
        """
        return self.__class__(str(self.get("base.dir")).rstrip("/") + "/")

    def __str__(self) -> str:
        return self._url

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._url!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UrlHelper):
            return NotImplemented
        return self._url == other._url

    def __hash__(self) -> int:
        return hash(self._url)


def url(url_string: str) -> UrlHelper:
    """Create a UrlHelper from a string."""
    return UrlHelper(url_string)
