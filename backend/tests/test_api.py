from oddeven import socketio


def test_index(client):
    res = client.get('/')
    assert res.status_code == 200
    data = res.get_json()
    assert data['namespace'] == '/ws'
    assert data['phase'] == 'awaiting_players'


def test_initial_state(client):
    res = client.get('/api/game/state')
    assert res.status_code == 200
    state = res.get_json()
    assert state['board'] == [0] * 25
    assert state['gameOver'] is False
    assert state['players'] == {'odd': False, 'even': False}
    assert state['bothPlayersConnected'] is False


def test_moves_listed_in_order(flask_app, client):
    odd = socketio.test_client(flask_app, namespace='/ws')
    even = socketio.test_client(flask_app, namespace='/ws')
    odd.emit('intent', {'type': 'INCREMENT', 'square': 6}, namespace='/ws')
    even.emit('intent', {'type': 'INCREMENT', 'square': 24}, namespace='/ws')

    data = client.get('/api/game/moves').get_json()
    assert data['count'] == 2
    first, second = data['moves']
    assert first == {**first, 'moveNumber': 1, 'square': 6, 'coordinate': 'B2', 'player': 'odd', 'value': 1}
    assert second['coordinate'] == 'E5'
    assert second['player'] == 'even'
    odd.disconnect(namespace='/ws')
    even.disconnect(namespace='/ws')


def test_scores_start_empty(client):
    scores = client.get('/api/scores').get_json()
    for role in ('odd', 'even'):
        assert scores[role]['wins'] == 0
        assert scores[role]['gamesPlayed'] == 0
        assert scores[role]['streakText'] == 'No streak'


def test_scores_streak_and_reset(flask_app, client):
    from oddeven.services.game.roles import Role
    from oddeven.services.game.scores import ScoreStore

    store = ScoreStore()
    store.record_result(Role.EVEN)
    store.record_result(Role.EVEN)
    store.record_result(Role.ODD)
    scores = client.get('/api/scores').get_json()
    assert scores['even']['wins'] == 2
    assert scores['even']['gamesPlayed'] == 3
    assert scores['even']['winPercentage'] == 67
    assert scores['even']['streakText'] == '1 Loss streak'
    assert scores['odd']['streakText'] == '1 Win streak'

    res = client.post('/api/scores/reset')
    assert res.status_code == 200
    assert res.get_json()['even']['wins'] == 0


def test_scores_reset_cli(flask_app):
    from oddeven.services.game.roles import Role
    from oddeven.services.game.scores import ScoreStore

    ScoreStore().record_result(Role.ODD)
    result = flask_app.test_cli_runner().invoke(args=['scores-reset'])
    assert 'Scores have been reset!' in result.output
    assert ScoreStore().get_scores()['odd']['wins'] == 0
