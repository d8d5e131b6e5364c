# mediashelf_cli/commands/item.py
import click
from mediashelf.models import SortOrder
from mediashelf.queries import visible_items
from mediashelf.services import UNSET
from ..utils import AppContext, handle_errors, format_item

SORT_CHOICES = [order.value for order in SortOrder]

@click.group()
def item():
    """Item management commands"""
    pass

@item.command(name='list')
@click.option('--shelf', 'shelf_ref', default=None, help='Only list items on this shelf (id or name)')
@click.option('--search', default='', help='Match title, author, notes or release year')
@click.option('--sort', type=click.Choice(SORT_CHOICES), default=SortOrder.ADDED.value, help='Sort order')
@click.pass_obj
@handle_errors
def list_items(app: AppContext, shelf_ref: str, search: str, sort: str):
    """List items, optionally filtered and sorted"""
    service = app.service
    collection = service.collection
    if shelf_ref:
        target = service.find_shelf(shelf_ref)
        items = collection.items_for_shelf(target.id)
        empty_message = f'No items on "{target.name}" yet.'
    else:
        target = None
        items = collection.list_items()
        empty_message = "No items yet."

    order = SortOrder(sort)
    results = visible_items(items, search, order)
    if not results:
        message = f'No items match "{search.strip()}".' if search.strip() else empty_message
        click.echo(click.style(message, fg='yellow'))
        return

    if app.verbose:
        click.echo(click.style(f"{len(results)} items, sorted by {order.display_name}", fg='blue'))
    for entry in results:
        shelf = None if target else collection.get_shelf(entry.shelf_id)
        click.echo(format_item(entry, shelf))

@item.command()
@click.argument('shelf_ref', metavar='SHELF')
@click.argument('title')
@click.option('--author', default=None, help='Author, director or studio')
@click.option('--year', type=int, default=None, help='Release year')
@click.option('--notes', default=None, help='Free-form notes')
@click.pass_obj
@handle_errors
def add(app: AppContext, shelf_ref: str, title: str, author: str, year: int, notes: str):
    """Add an item called TITLE to SHELF"""
    service = app.service
    target = service.find_shelf(shelf_ref)
    created = service.create_item(target.id, title, author=author, release_year=year, notes=notes)
    click.echo(click.style("Added item: ", fg='green') + format_item(created, target))

@item.command()
@click.argument('item_id')
@click.option('--title', default=None, help='New title')
@click.option('--shelf', 'shelf_ref', default=None, help='Move the item to this shelf (id or name)')
@click.option('--author', default=None, help='New author')
@click.option('--year', type=int, default=None, help='New release year')
@click.option('--notes', default=None, help='New notes')
@click.option('--clear-author', is_flag=True, help='Remove the author')
@click.option('--clear-year', is_flag=True, help='Remove the release year')
@click.option('--clear-notes', is_flag=True, help='Remove the notes')
@click.pass_obj
@handle_errors
def edit(app: AppContext, item_id: str, title: str, shelf_ref: str, author: str, year: int, notes: str,
         clear_author: bool, clear_year: bool, clear_notes: bool):
    """Change the fields of an item"""
    service = app.service
    changes = {}
    if title is not None:
        changes['title'] = title
    if shelf_ref is not None:
        changes['shelf_id'] = service.find_shelf(shelf_ref).id
    changes['author'] = None if clear_author else (author if author is not None else UNSET)
    changes['release_year'] = None if clear_year else (year if year is not None else UNSET)
    changes['notes'] = None if clear_notes else (notes if notes is not None else UNSET)
    updated = service.edit_item(item_id, **changes)
    click.echo(click.style("Updated item: ", fg='green') +
               format_item(updated, service.collection.get_shelf(updated.shelf_id)))

@item.command()
@click.argument('item_id')
@click.pass_obj
@handle_errors
def delete(app: AppContext, item_id: str):
    """Delete an item"""
    removed = app.service.remove_item(item_id)
    click.echo(click.style(f'Deleted "{removed.title}"', fg='green'))
