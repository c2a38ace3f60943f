import os
from flask import Flask, jsonify
import logging
from dotenv import load_dotenv

# --- Load Environment Variables ---
load_dotenv()

from backend.config import init_firestore
from backend.routes.login_route import init_login_routes
from backend.routes.admin_system_route import init_admin_system_routes

# --- Basic App Configuration ---
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def create_app(db=None):
    """Builds the Flask app; connects to Firestore unless a client is passed in."""
    app = Flask(__name__)

    app.config['SECRET_KEY'] = os.getenv('SECRET_KEY')
    if not app.config['SECRET_KEY']:
        raise ValueError("No SECRET_KEY set for Flask application. Please set it in your .env file.")

    # --- Firebase Initialization ---
    if db is None:
        try:
            db = init_firestore()
        except Exception as e:
            logger.error(f"Error initializing Firebase: {e}")

    # --- Register Blueprints (API Routes) ---
    if db is not None:
        init_login_routes(app, db)
        init_admin_system_routes(app, db)
        logger.info("All API routes registered successfully.")
    else:
        logger.error("Database not initialized. API routes will not be available.")

    @app.route('/health')
    def health():
        return jsonify({"status": "ok", "database": db is not None})

    return app


# --- Main Execution ---
if __name__ == '__main__':
    create_app().run(host='127.0.0.1', port=5000, debug=True)
