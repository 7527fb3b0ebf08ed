#!/usr/bin/env python3
"""
DAppNode build action - builds a package and comments the test release on its PRs
"""

import sys
import traceback

import typer

from build_action import gh_build_handler
from constants import DEFAULT_DIR

app = typer.Typer(help="DAppNode package GitHub Actions", no_args_is_help=True)


@app.callback()
def cli(
    ctx: typer.Context,
    dir: str = typer.Option(DEFAULT_DIR, "--dir", "-d", envvar="INPUT_DIR", help="Directory of the DAppNode package"),
):
    ctx.obj = {"dir": dir}


@app.command(name="build")
def build(ctx: typer.Context):
    """Build and upload test release and post a comment with install link to the triggering PR"""
    print("🚀 DAppNode build action starting...")
    gh_build_handler(dir=ctx.obj["dir"])
    print("✅ Build action complete!")


def main():
    """Entry point for the build action"""
    try:
        app(standalone_mode=False)
    except typer.Abort:
        sys.exit(1)
    except Exception as e:
        print(f"❌ Build action failed: {e}")
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
