"""tests/unit/test_exceptions.py"""

import pytest

from urlhelper.exceptions import MalformedUrlError, UrlHelperError


def test_exception_hierarchy():
    """Verify the inheritance structure of UrlHelper exceptions."""
    assert issubclass(MalformedUrlError, UrlHelperError)
    assert issubclass(MalformedUrlError, ValueError)


def test_malformed_url_error_message():
    """Verify that MalformedUrlError names the URL and reason."""
    with pytest.raises(MalformedUrlError) as exc_info:
        raise MalformedUrlError("http://x:y/", "Bad port")
    assert exc_info.value.url == "http://x:y/"
    assert exc_info.value.reason == "Bad port"
    assert "Bad port" in str(exc_info.value)
    assert "http://x:y/" in str(exc_info.value)


def test_malformed_url_error_default_reason():
    """Verify that MalformedUrlError has a default reason."""
    assert "Malformed URL" in str(MalformedUrlError("http://x:y/"))
