import os

from werkzeug.security import safe_join


def resolve_public_path(public_dir, request_path, default_document='index.html'):
    """Map a request path onto a file under public_dir.

    Returns None when the path would land outside public_dir.
    """
    relative = request_path.lstrip('/')
    if not relative:
        relative = default_document
    return safe_join(os.path.abspath(public_dir), relative)


def read_file_bytes(path):
    with open(path, 'rb') as f:
        return f.read()
