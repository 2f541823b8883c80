import click
from flask.cli import AppGroup

from sitecms.seeds import seed_homepage, seed_permissions, seed_roles

seed_cli = AppGroup("seed", help="Insert initial rows. Safe to run repeatedly.")


@seed_cli.command("roles")
def seed_roles_command():
    click.echo(f"Roles created: {seed_roles()}")


@seed_cli.command("hero-permissions")
def seed_permissions_command():
    click.echo(f"Permission rows created: {seed_permissions()}")


@seed_cli.command("homepage")
def seed_homepage_command():
    click.echo(f"Hero sections created: {seed_homepage()}")


@seed_cli.command("all")
def seed_all_command():
    click.echo(f"Roles created: {seed_roles()}")
    click.echo(f"Permission rows created: {seed_permissions()}")
    click.echo(f"Hero sections created: {seed_homepage()}")


def register_cli(app):
    app.cli.add_command(seed_cli)
