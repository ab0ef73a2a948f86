"""Shared fixtures for the Devotionals tests.

Every test gets its own SQLite file under pytest's ``tmp_path`` so
tests never see each other's rows.
"""
from __future__ import annotations

import pytest

from app import create_app
from app.routes.devotionals import STORE_EXTENSION


def make_config(db_path) -> dict:
    return {
        "TESTING": True,
        "DATABASE_PATH": str(db_path),
        "SQLALCHEMY_DATABASE_URI": f"sqlite:///{db_path}",
    }


@pytest.fixture()
def db_path(tmp_path):
    return tmp_path / "devotionals.db"


@pytest.fixture()
def app(db_path):
    return create_app(make_config(db_path))


@pytest.fixture()
def client(app):
    with app.test_client() as client:
        yield client


@pytest.fixture()
def store(app):
    """The application's store, used inside an app context."""
    with app.app_context():
        yield app.extensions[STORE_EXTENSION]
