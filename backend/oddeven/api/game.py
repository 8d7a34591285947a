from flask import Blueprint, current_app, jsonify

from oddeven.services.game.scores import ScoreStore

game_api = Blueprint('game_api', __name__)


def _authority():
    return current_app.extensions['game_authority']


@game_api.route('/game/state', methods=['GET'])
def get_game_state():
    """
    Returns a consistent snapshot of the authoritative game.
    """
    return jsonify(_authority().snapshot())


@game_api.route('/game/moves', methods=['GET'])
def get_moves():
    moves = _authority().moves()
    return jsonify({'moves': moves, 'count': len(moves)})


@game_api.route('/scores', methods=['GET'])
def get_scores():
    return jsonify(ScoreStore().get_scores())


@game_api.route('/scores/reset', methods=['POST'])
def reset_scores():
    store = ScoreStore()
    try:
        store.reset_scores()
    except Exception as exc:
        current_app.logger.exception(f"[score] reset failed: {exc}")
        return jsonify({'error': 'Could not reset scores'}), 500
    return jsonify(store.get_scores())
