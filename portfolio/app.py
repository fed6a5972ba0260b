from flask import Flask, request
from flask_cors import CORS

from portfolio.config import DefaultConfig
from portfolio.routes.static_files import static_bp, not_found, serve_path


def create_app(config=None):
    # static_folder=None so the blueprint owns every path
    app = Flask(__name__, static_folder=None)
    app.config.from_object(DefaultConfig)
    app.config.from_prefixed_env('PORTFOLIO')
    if config:
        app.config.update(config)

    if app.config.get('CORS_ORIGINS'):
        CORS(app, resources={r"/*": {"origins": app.config['CORS_ORIGINS']}})

    app.register_blueprint(static_bp)

    @app.errorhandler(404)
    def handle_not_found(_error):
        return not_found()

    # verbs outside the routed list (TRACE, PROPFIND, ...) are served the same way
    @app.errorhandler(405)
    def handle_other_method(_error):
        return serve_path(request.path)

    return app
