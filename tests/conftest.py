import pytest
from bs4 import BeautifulSoup

from app import create_app


@pytest.fixture()
def app():
    app = create_app('testing')
    yield app


@pytest.fixture()
def client(app):
    with app.test_client() as client:
        yield client


@pytest.fixture()
def make_client():
    """Build a test client for an app serving a custom project list"""
    def _make(projects):
        app = create_app('testing', projects=projects)
        return app.test_client()
    return _make


@pytest.fixture()
def soup_of():
    def _soup(resp):
        return BeautifulSoup(resp.get_data(as_text=True), 'html.parser')
    return _soup
