from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_cors import CORS
from flask_socketio import SocketIO
import click
from config import Config

db = SQLAlchemy()
socketio = SocketIO(async_mode=None)

def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))

    allowed_origins = flask_app.config.get('CORS_ORIGINS') or []
    db.init_app(flask_app)
    CORS(flask_app, origins=allowed_origins)

    # Initialize Socket.IO after app is created
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    # No migrations: the score table lives only as long as the database does
    import oddeven.models  # noqa: F401
    with flask_app.app_context():
        db.create_all()

    from oddeven.services.game.lifecycle import GameAuthority
    from oddeven.services.game.scores import ScoreStore
    from oddeven.services.game.transport import SocketIOTransport
    namespace = flask_app.config.get('SOCKETIO_NAMESPACE', '/ws')
    side = int(flask_app.config.get('BOARD_SIDE', 5))
    # One authority per process: it owns the board and the role map
    flask_app.extensions['game_authority'] = GameAuthority(
        SocketIOTransport(socketio, namespace),
        size=side * side,
        scores=ScoreStore(),
    )

    # Import and register blueprints here
    from oddeven.main import main
    flask_app.register_blueprint(main)

    from oddeven.api.game import game_api
    flask_app.register_blueprint(game_api, url_prefix='/api')

    # Register Socket.IO event handlers
    from oddeven.socketio_events import register_socketio_handlers
    register_socketio_handlers(namespace)

    @click.command('scores-reset')
    def scores_reset_command():
        """Clears the win/loss tally for both roles."""
        with flask_app.app_context():
            ScoreStore().reset_scores()
            print('Scores have been reset!')

    flask_app.cli.add_command(scores_reset_command)

    return flask_app
