"""CLI entrypoint: Typer app definition and command registration"""

import typer

from mdmanifest.cli.commands import generate_cmd, main_callback, scan_cmd


app = typer.Typer(name="mdmanifest", no_args_is_help=True, help="Markdown front-matter manifest generator")

app.callback()(main_callback)
app.command(name="generate")(generate_cmd)
app.command(name="scan")(scan_cmd)
