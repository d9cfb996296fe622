import pytest

from catalog_service.app import create_app
from catalog_service.config import Settings


@pytest.fixture
def static_dir(tmp_path):
    (tmp_path / "index.html").write_text("<html><body>catalog index</body></html>")
    (tmp_path / "app.js").write_text("console.log('catalog');")
    return tmp_path


@pytest.fixture
def settings(static_dir):
    return Settings(static_dir=static_dir)


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    return app.test_client()
