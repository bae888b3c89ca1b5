"""Allow running pagemap as ``python -m pagemap``."""

from pagemap.cli import app

if __name__ == "__main__":
    app()
