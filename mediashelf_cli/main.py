# mediashelf_cli/main.py
import click
from .utils import AppContext, configure_logging
from .commands.shelf import shelf
from .commands.item import item

@click.group()
@click.option('--db-url', default=None,
              help='Database URL (defaults to $MEDIASHELF_DATABASE_URL or sqlite:///mediashelf.db)')
@click.option('--write-behind/--write-through', default=False,
              help='Save changes on a background thread instead of before each command returns')
@click.option('--verbose/--no-verbose', default=False, help='Show detailed progress')
@click.pass_context
def cli(ctx, db_url, write_behind, verbose):
    """Media shelf collection manager"""
    configure_logging(verbose)
    app = AppContext(db_url=db_url, write_behind=write_behind, verbose=verbose)
    ctx.obj = app
    ctx.call_on_close(app.close)

cli.add_command(shelf)
cli.add_command(item)

def main():
    """Entry point for the CLI"""
    cli()

if __name__ == '__main__':
    main()
