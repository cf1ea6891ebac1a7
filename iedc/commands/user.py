"""User management CLI commands."""

import click
from flask.cli import with_appcontext

from iedc.models import UserStatus
from iedc.services import directory_store
from iedc.services.directory import RegistrationNotPending


@click.group('user')
def user_commands():
    """User management commands."""
    pass


@user_commands.command('list')
@click.option('--status', type=click.Choice([s.value for s in UserStatus]), help='Only users with this status')
@with_appcontext
def list_users(status):
    """List users in insertion order."""
    users, total = directory_store().list_users(status=status)
    if not users:
        click.echo('No users found.')
        return

    for user in users:
        click.echo(f'{user.id:>4}  {user.status.value:<8}  {user.role.value:<7}  {user.email}  ({user.name})')
    click.echo(f'{total} user(s)')


@user_commands.command('approve')
@click.argument('user_id', type=int)
@click.option('--reject', is_flag=True, help='Reject the registration instead of approving it')
@with_appcontext
def approve_user(user_id, reject):
    """Approve (or reject) a pending registration."""
    try:
        user = directory_store().review_registration(user_id, approve=not reject)
    except RegistrationNotPending:
        click.echo(click.style(f'Error: User {user_id} is not pending approval', fg='red'))
        return

    if user is None:
        click.echo(click.style(f'Error: User {user_id} not found', fg='red'))
        return

    outcome = 'rejected' if reject else 'approved'
    click.echo(click.style(f'User {user.email} {outcome}.', fg='green'))
    click.echo(f'  Status: {user.status.value}')
