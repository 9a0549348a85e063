import click
from flask.cli import with_appcontext
from hospital.extensions import db
from hospital.models.user_models import User
from hospital.services.identifier_service import ensure_sequences

@click.command('init-db')
@with_appcontext
def init_db_command():
    """Create all tables and the identifier sequences."""
    db.create_all()
    ensure_sequences()
    db.session.commit()

    click.echo("Database initialized successfully!")

@click.command('create-admin')
@click.option('--name', prompt=True)
@click.option('--email', prompt=True)
@click.password_option()
@with_appcontext
def create_admin_command(name, email, password):
    """Create an administrator account."""
    email = User.normalize_email(email)
    if User.query.filter_by(email=email).first():
        raise click.ClickException(f"User {email} already exists")

    admin = User(name=name.strip(), email=email, role='admin')
    try:
        admin.set_password(password)
    except ValueError as e:
        raise click.ClickException(str(e))

    db.session.add(admin)
    db.session.commit()
    click.echo(f"Admin {email} created with id {admin.id}")

def register_commands(app):
    app.cli.add_command(init_db_command)
    app.cli.add_command(create_admin_command)
