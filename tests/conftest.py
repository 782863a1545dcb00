"""
Shared fixtures: a fresh in-memory application per test.

The app context is only pushed around setup/teardown so every test-client
request gets its own context (and its own Flask-Login state).
"""

import pytest

from app import create_app
from cli import create_or_update_admin
from extensions import db


ADMIN_EMAIL = 'admin@example.com'
ADMIN_PASSWORD = 'correct-horse-battery'


@pytest.fixture
def app():
    app = create_app('testing')
    with app.app_context():
        db.create_all()
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_user(app):
    with app.app_context():
        user, _ = create_or_update_admin(ADMIN_EMAIL, ADMIN_PASSWORD, 'Admin')
        return user.id


@pytest.fixture
def admin_client(client, admin_user):
    response = client.post('/admin/login', json={'email': ADMIN_EMAIL, 'password': ADMIN_PASSWORD})
    assert response.status_code == 200
    return client


def make_post_payload(**overrides):
    payload = {
        'title': 'Automating Teams Rooms',
        'slug': 'automating-teams-rooms',
        'category': 'Automation',
        'content': '<p>Power Automate all the things.</p>',
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def create_post(client):
    """POST a blog post and return the decoded JSON body"""
    def _create(**overrides):
        response = client.post('/api/blog-posts', json=make_post_payload(**overrides))
        assert response.status_code == 201, response.get_json()
        return response.get_json()
    return _create
