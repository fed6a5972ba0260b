import os

PUBLIC_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'public')


class DefaultConfig:
    """Defaults for the site server. Override with PORTFOLIO_* env vars."""
    PUBLIC_DIR = PUBLIC_DIR
    DEFAULT_DOCUMENT = 'index.html'
    HOST = '127.0.0.1'
    PORT = 3000
    # None leaves responses without CORS headers
    CORS_ORIGINS = None
