"""CLI part of the project."""
import json
from typing import Optional

from typer import Argument, BadParameter, Exit, Option, Typer, echo

from .errors import UriBuilderError
from .url import UrlBuilder


def split_parameter(parameter: str) -> tuple[str, str]:
    """Splits a "key=value" command line parameter."""
    key, sep, value = parameter.partition("=")
    if not sep or not key:
        raise BadParameter(f"Expected KEY=VALUE, got {parameter!r}.")
    return key, value


def load_builder(base: str, secure: bool = False) -> UrlBuilder:
    """Creates a builder, exiting with an error message if `base` is bad."""
    try:
        return UrlBuilder(base, secure)
    except UriBuilderError as error:
        echo(f"Error: {error}", err=True)
        raise Exit(1) from error


def make_app() -> Typer:
    """Creates CLI application."""
    app = Typer(help="Takes apart and puts together HTTP(S) URLs.")

    @app.command()
    def build(  # pylint: disable=unused-variable,too-many-arguments
        base: str = Argument(..., help="URL to start from."),
        secure: bool = Option(False, "--secure", help="Use https."),
        append: Optional[list[str]] = Option(
            None, "--append", help="Section to add at the end."
        ),
        prepend: Optional[list[str]] = Option(
            None, "--prepend", help="Section to add at the beginning."
        ),
        remove: Optional[list[str]] = Option(
            None, "--remove", help="Section to remove (all occurrences)."
        ),
        param: Optional[list[str]] = Option(
            None, "--param", help="Parameter to set, as KEY=VALUE."
        ),
        extension: Optional[str] = Option(
            None, "--extension", help="File extension, e.g. json."
        ),
        trailing_slash: bool = Option(False, "--trailing-slash"),
    ) -> None:
        """Changes parts of BASE and prints the resulting URL."""
        parameters = dict(split_parameter(item) for item in param or [])

        builder = load_builder(base, secure)
        builder.prepend_sections(*(prepend or []))
        builder.append_sections(*(append or []))
        for section in remove or []:
            builder.remove_section(section)

        builder.append_parameters(parameters).set_file_extension(extension)

        echo(builder.build(trailing_slash))

    @app.command()
    def parse(  # pylint: disable=unused-variable
        base: str = Argument(..., help="URL to take apart."),
    ) -> None:
        """Prints the host, sections and parameters of BASE as JSON."""
        builder = load_builder(base)
        echo(
            json.dumps(
                {
                    "host": builder.get_url(),
                    "sections": builder.get_sections(),
                    "parameters": builder.get_parameters(),
                }
            )
        )

    @app.command()
    def version() -> None:  # pylint: disable=unused-variable
        """Prints uri_builder's version."""
        from . import __version__

        echo(__version__)

    return app
