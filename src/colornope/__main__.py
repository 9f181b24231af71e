"""colornope entry point for ``python -m colornope``."""

from colornope.cli import cli

if __name__ == "__main__":
    cli()
