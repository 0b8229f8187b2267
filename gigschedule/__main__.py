"""
Entry point for ``python -m gigschedule``.
"""

from .cli.app import app

if __name__ == "__main__":
    app()
