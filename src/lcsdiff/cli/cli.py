"""CLI entrypoint: Typer app definition and command registration"""

import typer

from lcsdiff.cli.commands import compare_cmd, config_cmd, words_cmd


app = typer.Typer(name="lcsdiff", no_args_is_help=True, help="Line and word level text comparison")

app.command(name="compare")(compare_cmd)
app.command(name="words")(words_cmd)
app.command(name="config")(config_cmd)
