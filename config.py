import os

class Config:
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev_secret_key')
    # relative sqlite paths land in the Flask instance folder
    SQLALCHEMY_DATABASE_URI = os.getenv('DATABASE_URI', 'sqlite:///gym_room.sqlite')
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    UPLOAD_FOLDER = os.getenv('UPLOAD_FOLDER', os.path.join('static', 'uploads'))
    DEFAULT_ADMIN_USERNAME = os.getenv('DEFAULT_ADMIN_USERNAME', 'admin')
    DEFAULT_ADMIN_PASSWORD = os.getenv('DEFAULT_ADMIN_PASSWORD', 'admin123')
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
