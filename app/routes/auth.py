from flask import Blueprint, request, jsonify, current_app
from app.models import db
from app.services.auth import authenticate, register_account

bp = Blueprint('auth', __name__)


@bp.route('/register', methods=['POST'])
def register():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    user_id = register_account(db.session,
                               data.get('username'),
                               data.get('password'),
                               current_app.config['BCRYPT_ROUNDS'])

    return jsonify({
        "success": True,
        "message": "User created successfully",
        "userId": user_id
    }), 201


@bp.route('/login', methods=['POST'])
def login():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    account = authenticate(db.session, data.get('username'),
                           data.get('password'))

    # Account data without the password hash
    return jsonify({"success": True, "user": account.to_dict()}), 200
