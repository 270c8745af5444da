import os

from dotenv import load_dotenv

load_dotenv()


def build_database_url():
    user = os.environ.get('DB_USER', 'root')
    password = os.environ.get('DB_PASSWORD', '')
    host = os.environ.get('DB_HOST', 'localhost')
    port = os.environ.get('DB_PORT', '3307')
    name = os.environ.get('DB_NAME', 'unity_game_db')
    return f"mysql+pymysql://{user}:{password}@{host}:{port}/{name}"


class Config:
    DATABASE_URL = os.environ.get('DATABASE_URL') or build_database_url()
    PORT = int(os.environ.get('PORT', 3000))

    # Must stay constant between registration and login
    BCRYPT_ROUNDS = int(os.environ.get('BCRYPT_ROUNDS', 10))

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()
    LOG_FILE = os.environ.get('LOG_FILE', 'app.log')
