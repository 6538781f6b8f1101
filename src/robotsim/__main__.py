"""Allow ``python -m robotsim``."""

from robotsim.cli import cli

if __name__ == "__main__":
    cli()
