from __future__ import annotations

import typer

from famtree.cli.commands.run import run_command

app = typer.Typer(
    name="famtree",
    help="Interactive family tree with centered generational view",
    add_completion=False,
)


@app.callback()
def callback():
    """
    Interactive family tree with centered generational view.
    """


app.command("run")(run_command)


def main():
    app()


if __name__ == "__main__":
    main()
