# mediashelf_cli/commands/shelf.py
import click
from mediashelf.exceptions import ValidationError
from mediashelf.icons import ICON_CATALOGUE, DEFAULT_ICON_NAME, icon_by_name
from ..utils import AppContext, handle_errors, format_shelf

ICON_NAMES = sorted(ICON_CATALOGUE)

@click.group()
def shelf():
    """Shelf management commands"""
    pass

@shelf.command(name='list')
@click.pass_obj
@handle_errors
def list_shelves(app: AppContext):
    """List shelves in display order"""
    collection = app.collection
    shelves = collection.list_shelves()
    if not shelves:
        click.echo(click.style("No shelves yet. Add one with 'shelf add NAME'.", fg='yellow'))
        return
    for position, entry in enumerate(shelves, 1):
        click.echo(format_shelf(position, entry, len(collection.items_for_shelf(entry.id))))

@shelf.command()
def icons():
    """List the icons a shelf can use"""
    for name in ICON_NAMES:
        icon = ICON_CATALOGUE[name]
        marker = " (default)" if name == DEFAULT_ICON_NAME else ""
        click.echo(f"{name}  U+{icon.code_point:04X}{marker}")

@shelf.command()
@click.argument('name')
@click.option('--icon', type=click.Choice(ICON_NAMES), default=DEFAULT_ICON_NAME, help='Shelf icon')
@click.pass_obj
@handle_errors
def add(app: AppContext, name: str, icon: str):
    """Add a shelf called NAME"""
    created = app.service.create_shelf(name, icon_by_name(icon))
    click.echo(click.style("Added shelf: ", fg='green') + click.style(created.name, fg='cyan') +
               click.style(f" (ID: {created.id})", dim=True))

@shelf.command()
@click.argument('shelf_ref', metavar='SHELF')
@click.option('--name', default=None, help='New shelf name')
@click.option('--icon', type=click.Choice(ICON_NAMES), default=None, help='New shelf icon')
@click.pass_obj
@handle_errors
def edit(app: AppContext, shelf_ref: str, name: str, icon: str):
    """Rename a shelf or change its icon

    SHELF is a shelf id or name.
    """
    service = app.service
    target = service.find_shelf(shelf_ref)
    changes = {}
    if name is not None:
        changes['name'] = name
    if icon is not None:
        changes['icon'] = icon_by_name(icon)
    if not changes:
        click.echo(click.style("Nothing to change. Use --name or --icon.", fg='yellow'))
        return
    updated = service.edit_shelf(target.id, **changes)
    click.echo(click.style("Updated shelf: ", fg='green') + click.style(updated.name, fg='cyan'))

@shelf.command()
@click.argument('shelf_ref', metavar='SHELF')
@click.option('--yes', is_flag=True, help='Delete without asking for confirmation')
@click.pass_obj
@handle_errors
def delete(app: AppContext, shelf_ref: str, yes: bool):
    """Delete a shelf and all of its items"""
    service = app.service
    target = service.find_shelf(shelf_ref)
    if not yes and not click.confirm(
        f'Are you sure you want to delete the "{target.name}" shelf and all its items? '
        'This action cannot be undone.'
    ):
        click.echo("Cancelled")
        return
    count = service.remove_shelf(target.id)
    click.echo(click.style(f'Deleted shelf "{target.name}" and {count} items', fg='green'))

@shelf.command()
@click.argument('shelf_ref', metavar='SHELF')
@click.argument('position', type=int)
@click.pass_obj
@handle_errors
def move(app: AppContext, shelf_ref: str, position: int):
    """Move a shelf to POSITION (1 is the top of the list)"""
    service = app.service
    target = service.find_shelf(shelf_ref)
    shelves = service.collection.list_shelves()
    if not 1 <= position <= len(shelves):
        raise ValidationError(f"Position must be between 1 and {len(shelves)}")
    old_index = next(i for i, entry in enumerate(shelves) if entry.id == target.id)
    new_index = position - 1
    # Reorder inserts before the shelf at new_index, counted before removal
    if new_index > old_index:
        new_index += 1
    service.move_shelf(old_index, new_index)
    click.echo(click.style(f'Moved "{target.name}" to position {position}', fg='green'))

@shelf.command()
@click.argument('shelf_ref', metavar='SHELF')
@click.option('--output', '-o', type=click.File('w'), default='-', help='File to write (defaults to stdout)')
@click.pass_obj
@handle_errors
def export(app: AppContext, shelf_ref: str, output):
    """Export the items of a shelf as JSON"""
    service = app.service
    target = service.find_shelf(shelf_ref)
    if not service.collection.items_for_shelf(target.id):
        click.echo(click.style(f'The "{target.name}" shelf is empty, nothing to export.', fg='yellow'), err=True)
        return
    click.echo(service.export_shelf(target.id), file=output)

@shelf.command(name='import')
@click.argument('shelf_ref', metavar='SHELF')
@click.argument('source', type=click.File('r'), default='-')
@click.pass_obj
@handle_errors
def import_items(app: AppContext, shelf_ref: str, source):
    """Import items from a JSON array into a shelf

    Items get new ids and are filed on SHELF whatever the file says.
    SOURCE defaults to stdin.
    """
    service = app.service
    target = service.find_shelf(shelf_ref)
    result = service.import_items(target.id, source.read())
    click.echo(click.style(f'Successfully imported {result.imported} items into "{target.name}".', fg='green'))
    if result.skipped:
        click.echo(click.style(f"Skipped {result.skipped} malformed items.", fg='yellow'))
