"""Main CLI entry point."""

import click

from pocketledger.logging_config import setup_logging
from pocketledger.cli.commands import demo, summarize


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Logging level (overrides POCKETLEDGER_LOG_LEVEL environment variable)",
    envvar="POCKETLEDGER_LOG_LEVEL",
)
@click.pass_context
def cli(ctx, log_level: str):
    """Pocketledger - in-memory personal finance ledger.

    Track accounts with dated income and expense transactions and
    compute per-account summaries. Nothing is saved between runs.
    """
    ctx.ensure_object(dict)
    if ctx.invoked_subcommand is not None:
        setup_logging(log_level)


demo.register_commands(cli)
summarize.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
