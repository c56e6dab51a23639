"""A fluent builder to take apart and put together HTTP(S) URLs."""
from typing import Callable, cast

from importlib_metadata import version

from .errors import InvalidUrlError, ParseError, UriBuilderError
from .parsing import validate_url
from .url import UrlBuilder, build_url

_version = cast(Callable[[str], str], version)

__version__ = _version(__package__)
__all__ = [
    "__version__",
    "InvalidUrlError",
    "ParseError",
    "UriBuilderError",
    "UrlBuilder",
    "build_url",
    "validate_url",
]
