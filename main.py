"""
Privacy Hub version manager - Entry point.

Usage:
    python main.py --process-all    # Archive new versions, then build the site
    python main.py --check-status   # Report outdated translations
    python main.py --help
"""

from privacy_hub.cli.main import app


def main():
    """Run the CLI application."""
    app()


if __name__ == "__main__":
    main()
