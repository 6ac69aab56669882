from flask import Blueprint, jsonify, request

from quakequiz.services.identity import (
    leaderboard_position,
    list_leaderboard,
    resolve_identity,
    submit_score,
)


scores = Blueprint('scores', __name__)


def _json_body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


@scores.route('/start_session', methods=['POST'])
def start_session():
    data = _json_body()
    created, identity = resolve_identity(data.get('nickname'), data.get('pin'))
    if created:
        return jsonify({
            'message': 'User created successfully',
            'created': True,
            'user': identity.to_dict(),
        }), 201
    return jsonify({
        'message': 'Authentication successful',
        'created': False,
        'user': identity.to_dict(),
    }), 200


@scores.route('/scores', methods=['GET'])
def get_scores():
    return jsonify([entry.to_dict() for entry in list_leaderboard()])


@scores.route('/scores', methods=['POST'])
def post_score():
    data = _json_body()
    identity = submit_score(data.get('nickname'), data.get('score'))
    return jsonify(identity.to_dict()), 200


@scores.route('/scores/position/<string:nickname>', methods=['GET'])
def get_position(nickname):
    return jsonify({'position': leaderboard_position(nickname)['position']})


@scores.route('/users/<string:nickname>/rating', methods=['GET'])
def get_rating(nickname):
    return jsonify(leaderboard_position(nickname))
