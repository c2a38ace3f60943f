from flask import Blueprint, request, jsonify, session
from flask_cors import cross_origin
import logging

logger = logging.getLogger(__name__)

# Create Blueprint for login routes
login_bp = Blueprint('login', __name__)

# Store db reference (will be set from app.py)
db = None

def init_login_routes(flask_app, db_instance):
    """Initializes the login routes and registers the blueprint."""
    global db
    db = db_instance
    flask_app.register_blueprint(login_bp, url_prefix='/api')

@login_bp.route('/login', methods=['POST', 'OPTIONS'])
@cross_origin()
def login():
    """
    Handle user login against the 'users' collection.
    Sets the session so the admin panel endpoints can check the role.
    """
    if request.method == 'OPTIONS':
        return jsonify({"success": True})

    try:
        data = request.get_json(silent=True)
        if not data or not data.get('email') or not data.get('password'):
            return jsonify({"success": False, "message": "Email and password are required"}), 400

        email = data.get('email')
        password = data.get('password')

        results = db.collection('users').where('email', '==', email).limit(1).get()
        if not results:
            return jsonify({"success": False, "message": "Invalid email or password"}), 401

        user_doc = results[0]
        user_data = user_doc.to_dict()

        if not user_data.get('password') or password != user_data['password']:
            return jsonify({"success": False, "message": "Invalid email or password"}), 401

        session['user_id'] = user_doc.id
        session['role'] = user_data.get('role', 'student')
        logger.info(f"Session set for user: {email}, role: {session['role']}")

        return jsonify({
            "success": True, "message": "Login successful",
            "user": {
                "uid": user_doc.id, "email": email,
                "displayName": user_data.get('displayName', 'User'),
                "role": session['role']
            }
        }), 200

    except Exception as e:
        logger.error(f"Unexpected error during login: {str(e)}")
        return jsonify({"success": False, "message": "An unexpected error occurred"}), 500

@login_bp.route('/logout', methods=['POST'])
def logout():
    """Clears the session."""
    session.clear()
    return jsonify({"success": True, "message": "Logged out"}), 200
