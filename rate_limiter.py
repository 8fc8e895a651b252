"""
Rate limiting configuration for the listing endpoints
"""
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
import os


def get_limiter_storage_uri():
    """
    Storage URI for rate limiter counters.
    REDIS_URL when set, in-process memory otherwise
    """
    return os.environ.get('REDIS_URL') or "memory://"


limiter = Limiter(
    key_func=get_remote_address,
    storage_uri=get_limiter_storage_uri(),
    default_limits=["1000 per hour", "100 per minute"],
    strategy="fixed-window",
)


def init_limiter(app):
    """Attach the shared limiter to a Flask app"""
    limiter.init_app(app)
    return limiter
