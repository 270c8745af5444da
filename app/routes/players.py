from flask import Blueprint, jsonify
from app.models import db
from app.services.stats import list_player_stats

bp = Blueprint('players', __name__)


@bp.route('/stats', methods=['GET'])
def get_stats():
    """Leaderboard of all players, highest score first"""
    return jsonify({"stats": list_player_stats(db.session)}), 200
