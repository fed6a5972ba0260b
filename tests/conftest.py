import os

import pytest

from portfolio.app import create_app
from portfolio.config import PUBLIC_DIR
from portfolio.ui.dom import Document, Window
from portfolio.ui.state import PageContext

with open(os.path.join(PUBLIC_DIR, "index.html"), encoding="utf-8") as f:
    INDEX_HTML = f.read()


@pytest.fixture
def public_dir(tmp_path):
    public = tmp_path / "public"
    public.mkdir()
    (public / "index.html").write_text("<html><body>home</body></html>")
    (public / "app.js").write_bytes(b"console.log('hi')\n")
    (public / "img").mkdir()
    (public / "img" / "logo.png").write_bytes(bytes(range(256)))
    (tmp_path / "secret.txt").write_text("do not serve")
    return public


@pytest.fixture
def app(public_dir):
    return create_app({"PUBLIC_DIR": str(public_dir), "TESTING": True})


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def window():
    return Window(inner_width=1280)


@pytest.fixture
def ctx(window):
    return PageContext.create(Document.from_html(INDEX_HTML), window=window)


def fill(document, **values):
    for name, value in values.items():
        document.query_selector(f'[name="{name}"]').value = value
