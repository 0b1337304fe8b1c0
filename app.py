import logging
import os

from flask import Flask, jsonify
from dotenv import load_dotenv

load_dotenv()

from config import Config  # noqa: E402  (load_dotenv needs to run first)
from extensions import db, login_manager  # noqa: E402  (load_dotenv needs to run first)
from utils import FieldError  # noqa: E402


def create_app(test_config=None) -> Flask:
    """Application factory for the gym room service.

    Raises schema.StorageUnavailable when the database cannot be opened.
    """

    app = Flask(__name__)
    app.config.from_object(Config)
    if test_config:
        app.config.update(test_config)

    logging.basicConfig(
        level=app.config.get("LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # init extensions
    db.init_app(app)
    login_manager.init_app(app)

    # blueprints
    from modules.auth import bp as auth_bp
    from modules.users import bp as users_bp
    from modules.staff import bp as staff_bp
    from modules.equipment import bp as equipment_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(users_bp)
    app.register_blueprint(staff_bp)
    app.register_blueprint(equipment_bp)

    @app.errorhandler(FieldError)
    def bad_field(exc):
        return jsonify(error="invalid", message=str(exc)), 400

    # DB
    from schema import initialize
    from storage import GymStorage

    with app.app_context():
        initialize(
            app.config["DEFAULT_ADMIN_USERNAME"],
            app.config["DEFAULT_ADMIN_PASSWORD"],
        )

    app.extensions["gym_storage"] = GymStorage(db.session)

    # uploads dir
    os.makedirs(app.config.get("UPLOAD_FOLDER", "uploads"), exist_ok=True)

    return app

if __name__ == "__main__":
    app = create_app()
    app.run(debug=True)
