"""CLI entrypoint: Typer app definition and command registration"""

import typer

from mdblog.cli.commands import build_cmd, categories_cmd, list_cmd, main_callback, render_cmd


app = typer.Typer(name="mdblog", no_args_is_help=True, help="Markdown blog renderer and static page builder")

app.callback()(main_callback)
app.command(name="render")(render_cmd)
app.command(name="build")(build_cmd)
app.command(name="list")(list_cmd)
app.command(name="categories")(categories_cmd)
