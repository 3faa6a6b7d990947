import sys

import typer

import cli.cli

if __name__ == "__main__":
    # Default to listing templates when run without arguments
    if len(sys.argv) == 1:
        sys.argv = ["run_cli.py", "templates"]
    typer_app: typer.Typer = cli.cli.app
    typer_app()
