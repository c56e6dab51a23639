"""Helper functions for uri_builder's unit tests."""
from urllib.parse import parse_qsl, urlsplit

from uri_builder.url import UrlBuilder


def has_parts(
    builder: UrlBuilder,
    host: str,
    sections: list[str],
    parameters: dict[str, str],
) -> bool:
    """Checks every part `builder` keeps, parameter order included."""
    assert builder.get_url() == host
    assert builder.get_sections() == sections
    assert list(builder.get_parameters().items()) == list(  # type: ignore
        parameters.items()
    )
    return True


def query_of(url: str) -> list[tuple[str, str]]:
    """Decodes the query string of a built URL back into pairs."""
    return parse_qsl(urlsplit(url).query, keep_blank_values=True)
