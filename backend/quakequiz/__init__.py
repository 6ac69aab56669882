from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_bcrypt import Bcrypt
from flask_cors import CORS
from flask_migrate import Migrate
import click
from config import Config

db = SQLAlchemy()
bcrypt = Bcrypt()
migrate = Migrate()

DEMO_PLAYERS = [
    ('quakeproof', '1111'),
    ('dropcoverhold', '2222'),
    ('aftershock', '3333'),
]


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)

    db.init_app(flask_app)
    bcrypt.init_app(flask_app)
    migrate.init_app(flask_app, db)
    CORS(flask_app, resources={r'/api/*': {'origins': flask_app.config.get('CORS_ORIGINS', [])}})

    # Import and register blueprints here
    from quakequiz.main import main
    flask_app.register_blueprint(main)

    from quakequiz.api.scores import scores
    # Mount score routes under /api to match frontend API client
    flask_app.register_blueprint(scores, url_prefix='/api')

    from quakequiz.api.errors import register_error_handlers
    register_error_handlers(flask_app)

    @click.command('db-reset')
    @click.option('--seed/--no-seed', default=False, help='Create a few demo players.')
    def db_reset_command(seed):
        """Drops and recreates the scores table, optionally seeding demo players."""
        from quakequiz.services.identity import resolve_identity
        with flask_app.app_context():
            db.drop_all()
            db.create_all()

            if seed:
                for nickname, pin in DEMO_PLAYERS:
                    resolve_identity(nickname, pin)
                click.echo(f'Seeded {len(DEMO_PLAYERS)} demo players.')
            click.echo('Database has been reset!')

    flask_app.cli.add_command(db_reset_command)

    return flask_app
