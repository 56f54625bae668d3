"""Allow ``python -m ledsectional``."""

from ledsectional.cli.main import cli

if __name__ == "__main__":
    cli()
