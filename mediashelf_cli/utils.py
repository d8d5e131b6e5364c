# mediashelf_cli/utils.py
import functools
import logging
from typing import Optional

import click

from mediashelf.exceptions import MediaShelfError
from mediashelf.icons import icon_name
from mediashelf.models import Item, Shelf
from mediashelf.persistence import BackgroundWriter, SqlBlobStorage, SyncWriter
from mediashelf.sa.database import Database
from mediashelf.services import CollectionService
from mediashelf.store import MediaCollection


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )


class AppContext:
    """Opens the collection on first use and saves it when the command ends"""

    def __init__(self, db_url: Optional[str] = None, write_behind: bool = False, verbose: bool = False):
        self.db_url = db_url
        self.write_behind = write_behind
        self.verbose = verbose
        self._database: Optional[Database] = None
        self._writer = None
        self._service: Optional[CollectionService] = None

    @property
    def service(self) -> CollectionService:
        if self._service is None:
            self._database = Database(self.db_url)
            self._database.init_db()
            storage = SqlBlobStorage(self._database)
            if self.write_behind:
                self._writer = BackgroundWriter(storage, on_error=self._write_failed)
            else:
                self._writer = SyncWriter(storage)
            collection = MediaCollection.load(storage, writer=self._writer)
            self._service = CollectionService(collection)
        return self._service

    @property
    def collection(self) -> MediaCollection:
        return self.service.collection

    def _write_failed(self, error: Exception) -> None:
        click.echo(click.style(f"Failed to save collection: {str(error)}", fg='red'), err=True)

    def close(self) -> None:
        if self._writer is not None:
            self._writer.close()
            self._writer = None
        if self._database is not None:
            self._database.dispose()
            self._database = None


def handle_errors(func):
    """Report collection errors in red and exit with status 1"""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except MediaShelfError as e:
            click.echo(click.style(f"Error: {str(e)}", fg='red'), err=True)
            click.get_current_context().exit(1)
    return wrapper


def format_shelf(position: int, shelf: Shelf, item_count: int) -> str:
    icon = icon_name(shelf.icon) or f"U+{shelf.icon.code_point:04X}"
    return (click.style(f"{position:>3}. ", fg='blue') +
            click.style(shelf.name, fg='cyan') +
            f" [{icon}] " +
            click.style(f"{item_count} items", fg='green') +
            click.style(f" (ID: {shelf.id})", dim=True))


def format_item(item: Item, shelf: Optional[Shelf] = None) -> str:
    line = click.style(item.title, fg='cyan')
    details = []
    if item.author:
        details.append(item.author)
    if item.release_year is not None:
        details.append(str(item.release_year))
    if details:
        line += " - " + ", ".join(details)
    if shelf is not None:
        line += click.style(f" [{shelf.name}]", fg='blue')
    line += click.style(f" (ID: {item.id})", dim=True)
    if item.notes:
        line += "\n    " + click.style(item.notes, fg='yellow')
    return line
