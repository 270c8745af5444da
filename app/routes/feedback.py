from flask import Blueprint, request, jsonify
from app.models import db
from app.services.feedback import submit_feedback

bp = Blueprint('feedback', __name__)


@bp.route('/feedback', methods=['POST'])
def save_feedback():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    feedback_id = submit_feedback(db.session, data.get('playerId'),
                                  data.get('comment'))
    return jsonify({"success": True, "feedbackId": feedback_id}), 200
