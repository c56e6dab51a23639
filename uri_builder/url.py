"""General tools for URL building."""
from typing import Mapping, Optional, Union
from urllib.parse import quote_plus

from .parsing import parse_url, validate_url

ParamValue = Union[str, int]


def _stringify(parameters: Mapping[str, ParamValue]) -> dict[str, str]:
    return {key: str(value) for key, value in parameters.items()}


class UrlBuilder:
    """
    Keeps an URL split into host, sections, parameters and file extension so
    each part can be changed before building it back into a string.

    Every mutator returns the builder itself, so calls may be chained:

        UrlBuilder("http://example.com/api").append_sections("items").build()
    """

    def __init__(self, base: str, secure: bool = False):
        self._host = ""
        self._sections: list[str] = []
        self._parameters: dict[str, str] = {}
        self._file_extension: Optional[str] = None
        self._secure = False

        self.set_base_url(base)
        self.set_secured(secure)

    def __str__(self) -> str:
        return self.build()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.build()!r})"

    @classmethod
    def create(cls, base: str, secure: bool = False) -> "UrlBuilder":
        """Same as calling the constructor."""
        return cls(base, secure)

    @staticmethod
    def validate_url(candidate: str) -> bool:
        """Checks if `candidate` looks like an URL."""
        return validate_url(candidate)

    def set_base_url(self, base: str) -> "UrlBuilder":
        """
        Breaks down `base` into host, sections and parameters, replacing the
        current ones. Extension and secure flag are kept.

        Raises `InvalidUrlError` if `base` doesn't look like an URL, or
        `ParseError` if its parameters can't be matched, leaving the builder
        untouched.
        """
        self._host, self._sections, self._parameters = parse_url(base)
        return self

    def get_url(self) -> str:
        """The bare host, without scheme, sections or parameters."""
        return self._host

    def set_secured(self, secure: bool) -> "UrlBuilder":
        """Uses https when `secure`, http otherwise."""
        self._secure = secure
        return self

    def is_secured(self) -> bool:
        return self._secure

    def get_file_extension(self) -> Optional[str]:
        return self._file_extension

    def set_file_extension(self, extension: Optional[str]) -> "UrlBuilder":
        """Sets the extension put after the last section (e.g. "json")."""
        self._file_extension = extension
        return self

    def get_sections(self) -> list[str]:
        return list(self._sections)

    def set_sections(self, sections: list[str]) -> "UrlBuilder":
        self._sections = list(sections)
        return self

    def append_sections(self, *sections: str) -> "UrlBuilder":
        self._sections.extend(sections)
        return self

    def prepend_sections(self, *sections: str) -> "UrlBuilder":
        self._sections[:0] = sections
        return self

    def shift_section(self) -> "UrlBuilder":
        """Removes the first section, if any."""
        if self._sections:
            del self._sections[0]
        return self

    def pop_section(self) -> "UrlBuilder":
        """Removes the last section, if any."""
        if self._sections:
            self._sections.pop()
        return self

    def remove_section(self, section: str, limit: int = 0) -> "UrlBuilder":
        """
        Removes occurrences of `section`, first ones first. A `limit` of 0
        (or less) removes all of them.
        """
        remaining = limit if limit > 0 else len(self._sections)
        sections: list[str] = []
        for current in self._sections:
            if current == section and remaining > 0:
                remaining -= 1
                continue
            sections.append(current)

        self._sections = sections
        return self

    def get_parameters(
        self, flatten: bool = False
    ) -> Union[dict[str, str], str]:
        """
        The URL parameters. With `flatten`, returns them as a query string
        ("?a=1&b=2", or "" when there are none) instead.
        """
        if flatten:
            return self._build_query_string()
        return dict(self._parameters)

    def set_parameters(self, parameters: Mapping[str, ParamValue]) -> "UrlBuilder":
        self._parameters = _stringify(parameters)
        return self

    def append_parameters(
        self, *parameters: Mapping[str, ParamValue]
    ) -> "UrlBuilder":
        """Merges each mapping in order. Later keys overwrite earlier ones."""
        for mapping in parameters:
            self._parameters |= _stringify(mapping)
        return self

    def shift_parameter(self) -> "UrlBuilder":
        """Removes the first inserted parameter, if any."""
        if self._parameters:
            del self._parameters[next(iter(self._parameters))]
        return self

    def pop_parameter(self) -> "UrlBuilder":
        """Removes the last inserted parameter, if any."""
        if self._parameters:
            self._parameters.popitem()
        return self

    def build(self, trailing_slash: bool = False) -> str:
        """Puts the URL back together."""
        scheme = "https" if self._secure else "http"
        url = f"{scheme}://{self._host}/{self._build_section_string(trailing_slash)}"

        if self._file_extension:
            url += f".{self._file_extension}"

        return url + self._build_query_string()

    get_build_url = build

    def _build_section_string(self, trailing_slash: bool) -> str:
        if not self._sections:
            return ""
        return "/".join(self._sections) + ("/" if trailing_slash else "")

    def _build_query_string(self) -> str:
        if not self._parameters:
            return ""
        return "?" + "&".join(
            f"{key}={quote_plus(value, safe='')}"
            for key, value in self._parameters.items()
        )


def build_url(
    page: str,
    params: Mapping[str, ParamValue],
    secure: Optional[bool] = None,
) -> str:
    """
    Builds URL with `params` merged over the ones already in `page`'s query
    string. Unless `secure` is given, keeps the scheme `page` was written with.

    Existing pairs go through the same parser as `UrlBuilder`, so pairs it
    doesn't pick up (e.g. "page_size=10") are not carried over.
    """
    if secure is None:
        secure = page.startswith("https://")

    return UrlBuilder(page, secure).append_parameters(params).build()
