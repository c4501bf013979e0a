"""CLI entrypoint: Typer app definition and command registration"""

import typer

from docstore.cli.commands import config_cmd, get_cmd, search_cmd


app = typer.Typer(name="docstore", no_args_is_help=True, help="In-memory document store test harness")

app.command(name="search")(search_cmd)
app.command(name="get")(get_cmd)
app.command(name="config")(config_cmd)
