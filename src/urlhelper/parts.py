"""src/urlhelper/parts.py

URL parts record and parser for UrlHelper.
"""

import logging
import urllib.parse
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple, Union

from urlhelper.exceptions import MalformedUrlError

__all__ = ["Part", "UrlParts", "parse_url"]

logger = logging.getLogger(__name__)


class Part(str, Enum):
    """Named URL parts, declared in the order they are written out."""

    SCHEME = "scheme"
    USER = "user"
    PASS = "pass"
    HOST = "host"
    PORT = "port"
    DIR = "dir"
    FILE = "file"
    EXT = "ext"
    QUERY = "query"
    FRAGMENT = "fragment"

    @property
    def field(self) -> str:
        """Name of the matching UrlParts attribute."""
        # 'pass' is a keyword
        if self is Part.PASS:
            return "password"
        return self.value


@dataclass(frozen=True)
class UrlParts:
    """
    Decomposed URL.

    Attributes:
        scheme: Scheme without the trailing ':'.
        user: Username from the userinfo.
        password: Password from the userinfo.
        host: Host as written (case preserved, IPv6 brackets kept).
        port: Port number, 0 when absent.
        path: Raw path, split further into dir, file and ext.
        dir: Path up to and including the last '/'.
        file: Filename without extension.
        ext: Extension without the leading '.'.
        query: Query string without the leading '?'.
        fragment: Fragment without the leading '#'.
    """

    scheme: str = ""
    user: str = ""
    password: str = ""
    host: str = ""
    port: int = 0
    path: str = ""
    dir: str = ""
    file: str = ""
    ext: str = ""
    query: str = ""
    fragment: str = ""

    def value(self, part: Part) -> Union[str, int]:
        """Return the value of a single part."""
        return getattr(self, part.field)

    def as_dict(self) -> Dict[str, Union[str, int]]:
        """Return the ten public parts keyed by part name (raw path excluded)."""
        return {part.value: self.value(part) for part in Part}


def _split_netloc(netloc: str) -> Tuple[str, str, str]:
    """Split an authority into user, password and host, keeping the host's case."""
    userinfo, _, hostinfo = netloc.rpartition("@")
    user, _, password = userinfo.partition(":")
    if hostinfo.startswith("["):
        host = hostinfo[: hostinfo.find("]") + 1]
    else:
        host = hostinfo.partition(":")[0]
    return user, password, host


def _split_path(path: str) -> Tuple[str, str, str]:
    """
    Split a path into directory, filename and extension.

    Dotfiles such as '.htaccess' have no extension, and neither does a
    filename ending in '.'.
    """
    slash = path.rfind("/")
    directory = path[: slash + 1]
    filename = path[slash + 1 :]
    stem, _, ext = filename.rpartition(".")
    if not stem or not ext:
        return directory, filename, ""
    return directory, stem, ext


def parse_url(url: str) -> UrlParts:
    """
    Parse a URL string into its parts.

    Args:
        url: URL string, absolute or relative.

    Returns:
        UrlParts with every missing part set to '' (or 0 for the port).

    Raises:
        MalformedUrlError: If the authority cannot be split.
    """
    try:
        split = urllib.parse.urlsplit(url)
        port = split.port
    except ValueError as exc:
        logger.debug("Rejected malformed URL %r: %s", url, exc)
        raise MalformedUrlError(url, str(exc)) from exc

    user, password, host = _split_netloc(split.netloc)
    directory, filename, ext = ("", "", "")
    if split.path:
        directory, filename, ext = _split_path(split.path)

    return UrlParts(
        scheme=split.scheme,
        user=user,
        password=password,
        host=host,
        port=port or 0,
        path=split.path,
        dir=directory,
        file=filename,
        ext=ext,
        query=split.query,
        fragment=split.fragment,
    )
