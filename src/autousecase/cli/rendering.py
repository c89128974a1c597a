import typer

from autousecase.common.messaging import protocols

LEVEL_COLORS = {
    "success": typer.colors.GREEN,
    "warning": typer.colors.YELLOW,
    "error": typer.colors.RED,
    "debug": typer.colors.BRIGHT_BLACK,
}


class CliRenderer(protocols.Renderer):
    """Prints bus messages to the terminal; warnings and errors go to stderr."""

    def __init__(self, verbose: bool = False):
        self.verbose = verbose

    def render(self, message: str, level: str):
        if level == "debug" and not self.verbose:
            return
        typer.secho(
            message,
            fg=LEVEL_COLORS.get(level),
            err=level in ("warning", "error"),
        )
