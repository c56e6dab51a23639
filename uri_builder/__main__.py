"""Command line entry point: `python -m uri_builder`."""
from .cli import make_app

app = make_app()


if __name__ == "__main__":
    app()
