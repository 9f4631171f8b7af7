"""Main application setup for the checker-options CLI."""

from __future__ import annotations

import logging
from typing import Annotated, Literal

from cyclopts import App, Parameter

from cli.commands.version import get_version

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

_HELP_EPILOGUE = """
Examples:
  checker-options show                              Show the default options
  checker-options show --overrides opts.json        Show options with overrides
  checker-options fingerprint --overrides opts.json Print the options fingerprint
  checker-options explain src/components/Button.js  Show per-file decisions

Environment Variables:
  CHECKER_OPTIONS_LOG_LEVEL  Default log level (DEBUG, INFO, WARNING, ERROR)
"""

app = App(
    name="checker-options",
    help="Inspect checker options and the decisions derived from them.",
    help_epilogue=_HELP_EPILOGUE,
    version=get_version(),
    version_flags=["--version", "-V"],
    default_parameter=Parameter(show_default=True),
)


@app.meta.default
def meta_launcher(
    *tokens: Annotated[str, Parameter(show=False, allow_leading_hyphen=True)],
    log_level: Annotated[
        Literal["DEBUG", "INFO", "WARNING", "ERROR"],
        Parameter(
            name="--log-level",
            help="Logging verbosity level.",
            env_var="CHECKER_OPTIONS_LOG_LEVEL",
        ),
    ] = "WARNING",
) -> int:
    """Configure logging, then dispatch to the selected command.

    Returns
    -------
    int
        Exit status code from command execution.

    Raises
    ------
    ValueError
        Raised when the log level is invalid.
    """
    if log_level not in LOG_LEVELS:
        msg = f"Unsupported log level {log_level!r}."
        raise ValueError(msg)
    logging.basicConfig(level=log_level)
    return app(tokens)


# Lazy-loaded commands
app.command("cli.commands.options:show_options", name="show")
app.command("cli.commands.options:fingerprint_options", name="fingerprint")
app.command("cli.commands.options:explain_file", name="explain")
app.command("cli.commands.version:version_command", name="version")


def main() -> None:
    """Run the checker-options CLI."""
    app.meta()


__all__ = ["app", "main"]
