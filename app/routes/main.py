from flask import Blueprint, jsonify

bp = Blueprint('main', __name__)


@bp.route('/', strict_slashes=True)
def index():
    """Return API status"""
    return jsonify({"status": "ok", "message": "Game Accounts API"})


@bp.route('/api/health')
def health_check():
    """API health check endpoint"""
    return jsonify({"status": "ok", "message": "API is running"})
