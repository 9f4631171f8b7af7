"""Module entrypoint for the checker-options CLI."""

from __future__ import annotations

from cli.app import app


def main() -> None:
    """Run the checker-options CLI."""
    app.meta()


if __name__ == "__main__":
    main()
