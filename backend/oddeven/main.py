from flask import Blueprint, current_app, jsonify

main = Blueprint('main', __name__)

@main.route('/')
def index():
    authority = current_app.extensions['game_authority']
    return jsonify({
        'message': 'Welcome to the Odd/Even game server!',
        'namespace': current_app.config.get('SOCKETIO_NAMESPACE', '/ws'),
        'phase': authority.state.phase.value,
    })
