import click
from flask import current_app
from flask.cli import with_appcontext
from app.models import db


@click.command('init-db')
@with_appcontext
def init_db_command():
    """Create any missing tables."""
    db.create_all()
    click.echo("Database tables created.")


@click.command('generate-dummy-data')
@click.option('--players', default=25, show_default=True, type=int,
              help='Number of dummy accounts to create.')
@click.option('--max-games', default=50, show_default=True, type=int,
              help='Upper bound for games played per account.')
@with_appcontext
def generate_dummy_data_command(players, max_games):
    """Populate the leaderboard with random players."""
    from app.utils.dummy_data import generate_dummy_data

    try:
        created = generate_dummy_data(db.session, players, max_games,
                                      current_app.config['BCRYPT_ROUNDS'])
    except Exception as e:
        click.echo(f"Error generating dummy data: {str(e)}", err=True)
        raise SystemExit(1)

    click.echo(f"Created {len(created)} dummy players.")


def register_commands(app):
    app.cli.add_command(init_db_command)
    app.cli.add_command(generate_dummy_data_command)
