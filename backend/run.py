import sys

from oddeven import create_app, socketio

app = create_app()


def serve(flask_app):
    host = flask_app.config['HOST']
    port = flask_app.config['PORT']
    try:
        socketio.run(flask_app, host=host, port=port, debug=flask_app.config['DEBUG'], allow_unsafe_werkzeug=True)
    except OSError as exc:
        flask_app.logger.critical(f"[startup] cannot listen on {host}:{port}: {exc}")
        sys.exit(1)
    except SystemExit as exc:
        # werkzeug reports a failed bind itself and exits with status 1;
        # other codes (the reloader restarts with 3) pass through
        if exc.code != 1:
            raise
        flask_app.logger.critical(f"[startup] cannot listen on {host}:{port}")
        raise


if __name__ == '__main__':
    serve(app)
