"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None, prog: str | None = None) -> int:
    """Main CLI entry point.

    Returns the process exit code: 0 on success, 1 on failure, bad usage
    or an unknown command.
    """
    import typer

    from hgctl.cli._create_app import _create_app

    if argv is None:
        argv = sys.argv[1:]
    if prog is None:
        prog = sys.argv[0] or "hgctl"

    app = _create_app()
    try:
        rv = app(argv, prog_name=prog, standalone_mode=False)
    except typer.Abort:
        return 130
    except Exception as e:
        typer.echo(f"Unhandled error: {e}", err=True)
        return 1
    return rv if isinstance(rv, int) else 0
