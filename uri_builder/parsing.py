"""Breaks URL strings into the parts UrlBuilder keeps track of."""
import re
from typing import NamedTuple

from .errors import InvalidUrlError, ParseError

# A parenthesized chunk, one level of nesting allowed: "(a)" or "(a(b)c)".
_PARENTHESIZED = r"\((?:[^\s()<>]|\([^\s()<>]+\))*\)"

# Loose "looks like an URL" matcher: scheme-prefixed, "www."-prefixed or a
# bare domain followed by a path, not ending in punctuation.
# Every chunk after the prefix is a single character or a whole
# parenthesized group, so a failing search backtracks linearly.
URL_PATTERN = re.compile(
    r"(?i)\b("
    r"(?:[a-z][\w-]+:(?:/{1,3}|[a-z0-9%])|www\d{0,3}[.]|[a-z0-9.\-]+[.][a-z]{2,4}/)"
    rf"(?:[^\s()<>]|{_PARENTHESIZED})+"
    rf"(?:{_PARENTHESIZED}|[^\s`!()\[\]{{}};:'\".,<>?«»“”‘’])"
    r")"
)

# Only alphabetic keys and alphanumeric values are picked up. Nothing anchors
# the end of a value, so "d=y-z" keeps "y" and "c=%20x" keeps "".
# Kept as a string and compiled on use, where compile failures become
# ParseError.
PARAMETER_PATTERN = r"(?<=[?&])([A-Za-z]+)=([A-Za-z0-9]*)"

SCHEME_PATTERN = re.compile(r"^https?://")


class ParsedUrl(NamedTuple):
    """The parts a base string is split into."""

    host: str
    sections: list[str]
    parameters: dict[str, str]


def validate_url(candidate: str) -> bool:
    """Checks if `candidate` looks like an URL. Not a strict RFC check."""
    return URL_PATTERN.search(candidate) is not None


def parse_parameters(query_string: str) -> dict[str, str]:
    """
    Parses `key=value` pairs from a query string (the part after "?").

    Pairs with a non-alphabetic key are ignored; a value is cut at its first
    non-alphanumeric character. A key seen twice keeps its last value.
    """
    try:
        pattern = re.compile(PARAMETER_PATTERN)
        matches = [
            (match.group(1), match.group(2))
            for match in pattern.finditer(f"?{query_string}")
        ]
    except re.error as error:
        raise ParseError(
            f"An error occurred while parsing URL parameters: {error}"
        ) from error

    return dict(matches)


def parse_sections(path: str) -> list[str]:
    """
    Splits a path fragment (the part starting at the first "/") into its
    sections.
    """
    _, *sections = path.split("/")
    return sections


def parse_url(base: str) -> ParsedUrl:
    """Breaks down `base` into host, sections and parameters."""
    if not validate_url(base):
        raise InvalidUrlError(f"Passed string is not a valid URL: {base!r}")

    url = SCHEME_PATTERN.sub("", base).rstrip()

    parameters: dict[str, str] = {}
    if "?" in url:
        url, query_string = url.split("?", maxsplit=1)
        parameters = parse_parameters(query_string)
        url = url.rstrip("/")

    sections: list[str] = []
    if "/" in url:
        slash = url.index("/")
        sections = parse_sections(url[slash:])
        url = url[:slash].rstrip("/")

    host = url.rstrip("/")
    if not host:
        raise InvalidUrlError(f"Passed string has no host: {base!r}")

    return ParsedUrl(host, sections, parameters)
