"""Pytest fixtures for the site tests."""

from pathlib import Path

import pytest

from web.app import create_app


@pytest.fixture
def app():
    """Application with the bundled templates and static assets."""
    app = create_app({'TESTING': True})
    return app


@pytest.fixture
def client(app):
    """Flask test client."""
    return app.test_client()


@pytest.fixture
def empty_templates(tmp_path: Path) -> Path:
    """Template folder without any page templates."""
    folder = tmp_path / 'templates'
    folder.mkdir()
    return folder


@pytest.fixture
def broken_client(empty_templates: Path):
    """Client whose app cannot find any template."""
    app = create_app({'TESTING': True, 'TEMPLATE_FOLDER': str(empty_templates)})
    return app.test_client()
