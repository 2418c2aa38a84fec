import pytest

from app import create_app
from config import Settings
from storage import SiteStore


@pytest.fixture
def settings(tmp_path):
    public = tmp_path / "public"
    public.mkdir()
    (public / "index.html").write_text("<h1>lookup</h1>", encoding="utf-8")
    return Settings(admin_password="secret", data_dir=str(tmp_path / "data"), public_dir=str(public))


@pytest.fixture
def store(settings):
    return SiteStore(settings.sites_path, settings.matrices_path)


@pytest.fixture
def client(store, settings):
    app = create_app(store=store, settings=settings)
    app.config["TESTING"] = True
    return app.test_client()
