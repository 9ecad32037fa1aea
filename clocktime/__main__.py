"""
Entry point for ``python -m clocktime``.
"""

from .cli.app import app

if __name__ == "__main__":
    app()
