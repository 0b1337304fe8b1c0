from flask import current_app
from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager

# Extensions are created unbound and attached in create_app()

# Database (one SQLite file per installation)
db = SQLAlchemy()

# Session handling for the HTTP layer
login_manager = LoginManager()


def get_storage():
    """The GymStorage built by create_app() for the current application."""
    return current_app.extensions["gym_storage"]
