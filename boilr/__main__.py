# boilr/__main__.py
"""Entry point for `python -m boilr`."""

from boilr.cli import app

if __name__ == "__main__":
    app()
