from flask import Blueprint, jsonify, request
import logging
from impossible_games.routes import get_store
from impossible_games.services.record_store import StoreError

# Set up logging
logger = logging.getLogger(__name__)

bp = Blueprint('users', __name__)


def get_payload():
    """JSON body, falling back to form data; malformed JSON reads as empty"""
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form


@bp.route('/health')
def health_check():
    """API health check endpoint"""
    return jsonify({"status": "ok", "message": "API is running"})


@bp.route('/save-user', methods=['POST'])
def save_user():
    name = get_payload().get('name')

    if not isinstance(name, str) or not name.strip():
        return jsonify({"error": "Name is required"}), 400

    get_store().create(name.strip())
    return jsonify({"success": True, "message": "User saved successfully"})


@bp.route('/check-user/<name>', methods=['GET'])
def check_user(name):
    return jsonify({"exists": get_store().exists(name)})


@bp.route('/users', methods=['GET'])
def list_users():
    return jsonify({"users": get_store().get_all()})


@bp.route('/update-result', methods=['POST'])
def update_result():
    """Record a win or loss: {user, game, result}"""
    data = get_payload()
    try:
        get_store().record_result(data.get('user'), data.get('game'),
                                  data.get('result'))
    except StoreError as e:
        logger.warning(
            f"Rejected result for {data.get('user')!r}: {e.message}")
        return jsonify({"error": e.message}), 400

    return jsonify({"success": True})
