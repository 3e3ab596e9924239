"""Typer group that answers bad command lines with the init-script usage line."""

import typer
from typer.core import TyperGroup

from hgctl.api.service.Command import usage_message

# Parser usage errors carry exit status 2 regardless of which click typer runs on
_USAGE_EXIT_CODE = 2


class _ServiceGroup(TyperGroup):
    """Top-level group: unknown commands or options print the usage line and exit 1."""

    def _usage_exit(self, ctx) -> None:
        typer.echo(usage_message(ctx.find_root().info_name or "hgctl"), err=True)
        raise typer.Exit(1)

    def parse_args(self, ctx, args):
        try:
            return super().parse_args(ctx, args)
        except typer.Exit:
            raise
        except Exception as e:
            if getattr(e, "exit_code", None) != _USAGE_EXIT_CODE:
                raise
            self._usage_exit(ctx)

    def resolve_command(self, ctx, args):
        if args and not ctx.resilient_parsing and self.get_command(ctx, args[0]) is None:
            self._usage_exit(ctx)
        return super().resolve_command(ctx, args)
