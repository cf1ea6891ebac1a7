"""Data seeding CLI commands."""

import click
from flask.cli import with_appcontext

from iedc.services import content_store, directory_store
from iedc.services.seed import reset_store


@click.group('seed')
def seed_commands():
    """Data seeding commands."""
    pass


@seed_commands.command('demo')
@click.option('--empty', is_flag=True, help='Recreate the tables without loading demo data')
@with_appcontext
def seed_demo(empty):
    """Reset the store and reload the demo data set.

    Every table is dropped and recreated, so ids start again from 1.
    """
    directory = directory_store()
    reset_store(directory, content_store(), seed=not empty)

    if empty:
        click.echo(click.style('Store reset; no demo data loaded.', fg='yellow'))
        return

    stats = directory.dashboard_stats()
    click.echo(click.style('Demo data loaded!', fg='green'))
    click.echo(f"  Users: {stats['totalUsers']}")
    click.echo(f"  Events: {stats['totalEvents']}")
