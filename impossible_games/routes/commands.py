import click
from flask.cli import with_appcontext
from impossible_games.models import GAME_IDS
from impossible_games.routes import get_store


@click.command('list-users')
@with_appcontext
def list_users_command():
    """List registered users with their total wins and losses."""
    users = get_store().get_all()
    if not users:
        click.echo("No registered users.")
        return

    for name, record in sorted(users.items()):
        games = record['games']
        wins = sum(games[game_id]['wins'] for game_id in GAME_IDS)
        losses = sum(games[game_id]['losses'] for game_id in GAME_IDS)
        click.echo(f"{name}: {wins} wins, {losses} losses")


@click.command('flush-users')
@with_appcontext
def flush_users_command():
    """Rewrite the users file and every per-user results file."""
    store = get_store()
    if store.flush_all():
        click.echo(f"Flushed {len(store)} users.")
    else:
        raise click.ClickException("Error flushing users, see the log.")


def register_commands(app):
    app.cli.add_command(list_users_command)
    app.cli.add_command(flush_users_command)
