"""src/urlhelper/__init__.py

UrlHelper - immutable URL wrapper for Python.

Splits a URL into scheme, user, pass, host, port, dir, file, ext, query and
fragment, tells absolute, root-relative and context-relative URLs apart, and
builds new URLs from a dot-separated parts expression.

Example::

    from urlhelper import UrlHelper

    page = UrlHelper('https://www.example.com:8880/foo/bar/baz.php?a=1#top')
    page.is_absolute()                   # True
    page.get_part('ext')                 # 'php'
    str(page.get('base.dir.file.ext'))   # 'https://www.example.com:8880/foo/bar/baz.php'
    str(page.get_context_part())         # 'https://www.example.com:8880/foo/bar/'
"""

from urlhelper.exceptions import MalformedUrlError, UrlHelperError
from urlhelper.expression import BASE_EXPRESSION, DEFAULT_EXPRESSION
from urlhelper.helper import UrlHelper, url
from urlhelper.parts import Part, UrlParts, parse_url
from urlhelper.version import __version__

__all__ = [
    "UrlHelper",
    "url",
    "UrlParts",
    "Part",
    "parse_url",
    "BASE_EXPRESSION",
    "DEFAULT_EXPRESSION",
    "UrlHelperError",
    "MalformedUrlError",
    "__version__",
]
