import mimetypes

from flask import Blueprint, Response, current_app

from portfolio.utils.paths import resolve_public_path, read_file_bytes

static_bp = Blueprint('static_files', __name__)

ALL_METHODS = ['GET', 'HEAD', 'POST', 'PUT', 'DELETE', 'PATCH', 'OPTIONS']
NOT_FOUND_BODY = '404 - Not Found'


def not_found():
    return Response(NOT_FOUND_BODY, status=404, mimetype='text/plain')


def serve_path(filename):
    """Respond with the bytes of filename under PUBLIC_DIR, or the fixed 404."""
    public_dir = current_app.config['PUBLIC_DIR']
    path = resolve_public_path(public_dir, filename, current_app.config['DEFAULT_DOCUMENT'])
    if path is None:
        current_app.logger.debug("Rejected path outside public root: %r", filename)
        return not_found()

    try:
        data = read_file_bytes(path)
    except (OSError, ValueError) as e:
        # missing, directory, permission and NUL-byte paths all read as not found
        current_app.logger.debug("Cannot read %r: %s", path, e)
        return not_found()

    mimetype, _ = mimetypes.guess_type(path)
    return Response(data, status=200, mimetype=mimetype)


@static_bp.route('/', defaults={'filename': ''}, methods=ALL_METHODS,
                 provide_automatic_options=False)
@static_bp.route('/<path:filename>', methods=ALL_METHODS,
                 provide_automatic_options=False)
def serve_file(filename):
    return serve_path(filename)
