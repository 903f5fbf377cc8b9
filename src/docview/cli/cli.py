"""CLI entrypoint: Typer app definition and command registration"""

import typer

from docview.cli.commands import date_cmd, export_cmd, show_cmd, validate_cmd


app = typer.Typer(name="docview", no_args_is_help=True, help="Typed JSON document viewer")

app.command(name="show")(show_cmd)
app.command(name="validate")(validate_cmd)
app.command(name="export")(export_cmd)
app.command(name="date")(date_cmd)
