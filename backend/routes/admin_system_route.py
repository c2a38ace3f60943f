from flask import Blueprint, request, jsonify, session
import logging
from functools import wraps

from backend.push import DEFAULT_BODY, DEFAULT_TITLE, notify_all_users
from backend.reset import build_reset_orchestrator

# --- Blueprint Setup ---
admin_system_bp = Blueprint('admin_system', __name__)
logger = logging.getLogger(__name__)
db = None

RESET_CONFIRMATION = 'RESET'

def init_admin_system_routes(flask_app, firestore_db):
    """Initializes the admin system routes."""
    global db
    db = firestore_db
    flask_app.register_blueprint(admin_system_bp, url_prefix='/api/system')

# --- Authentication Decorator ---
def admin_login_required(f):
    """Decorator to ensure a user is logged in as an admin."""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        role = session.get('role') or ''
        if 'user_id' not in session or role.lower() != 'admin':
            return jsonify({"error": "Authentication required. Please log in as an admin."}), 401
        return f(*args, **kwargs)
    return decorated_function

# ==============================================================================
# --- 1. DATABASE RESET ---
# ==============================================================================

@admin_system_bp.route('/reset', methods=['POST'])
@admin_login_required
def reset_database():
    """Deletes every document in the database and writes the placeholder docs back."""
    data = request.get_json(silent=True) or {}
    if data.get('confirm') != RESET_CONFIRMATION:
        return jsonify({"error": f"Send {{\"confirm\": \"{RESET_CONFIRMATION}\"}} to reset the database."}), 400

    collections = data.get('collections')
    if collections is not None and (
            not isinstance(collections, list) or not all(isinstance(name, str) for name in collections)):
        return jsonify({"error": "collections must be a list of collection names."}), 400

    page_size = data.get('pageSize')
    try:
        orchestrator = build_reset_orchestrator(db, page_size)
    except ValueError as e:
        return jsonify({"error": str(e)}), 400

    try:
        logger.warning(f"Admin {session.get('user_id')} started a full database reset.")
        report = orchestrator.reset_all(collections)
    except Exception as e:
        logger.error(f"Error resetting Firestore: {e}")
        return jsonify({"error": "Failed to reset the database."}), 500

    return jsonify(report.to_dict()), 200 if report.ok else 207

# ==============================================================================
# --- 2. PUSH NOTIFICATIONS ---
# ==============================================================================

@admin_system_bp.route('/notifications', methods=['POST'])
@admin_login_required
def broadcast_notification():
    """Sends a push notification to every user that registered a device."""
    data = request.get_json(silent=True) or {}
    try:
        summary = notify_all_users(
            db,
            title_template=data.get('title', DEFAULT_TITLE),
            body=data.get('body', DEFAULT_BODY),
        )
        logger.info(f"Admin {session.get('user_id')} broadcast a notification.")
        return jsonify(summary.to_dict()), 200
    except Exception as e:
        logger.error(f"Error sending notifications: {e}")
        return jsonify({"error": "Failed to send notifications."}), 500
