import os
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Config:
    # Secret key for session management and CSRF tokens
    SECRET_KEY = os.environ.get("SECRET_KEY") or "work-journal-secret-key"

    # Database configuration
    basedir = os.path.abspath(os.path.dirname(__file__))
    SQLALCHEMY_DATABASE_URI = os.environ.get(
        "DATABASE_URL"
    ) or "sqlite:///" + os.path.join(basedir, "journal.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Journal behaviour
    JOURNAL_SUBMIT_DELAY = float(os.environ.get("JOURNAL_SUBMIT_DELAY") or 0)
    JOURNAL_STRICT_TYPES = _env_flag("JOURNAL_STRICT_TYPES")

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()


class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    WTF_CSRF_ENABLED = False
    JOURNAL_SUBMIT_DELAY = 0
    JOURNAL_STRICT_TYPES = False
