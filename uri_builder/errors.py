"""Common errors that may be thrown."""


class UriBuilderError(Exception):
    """Base class for every error raised by uri_builder."""


class InvalidUrlError(UriBuilderError):
    """Thrown when a base string doesn't look like an URL at all."""


class ParseError(UriBuilderError):
    """
    Thrown when the query string matcher itself fails (not when it simply
    finds no parameters).
    """
