"""Seed script for initial data.

Running this script will populate the database with a handful of
sample devotionals for demonstration purposes. It can be executed with
``python -m seed.seed`` from the project root.
"""
from __future__ import annotations

import logging

from flask import Flask

from app import create_app
from app.routes.devotionals import STORE_EXTENSION

logger = logging.getLogger(__name__)

SAMPLE_DEVOTIONALS = [
    (
        "John 3:16",
        "For God so loved the world that he gave his one and only Son. "
        "Rest today in a love that was given before it was asked for.",
    ),
    (
        "Psalm 23:1",
        "The Lord is my shepherd, I lack nothing. Name one need you can "
        "hand over instead of carrying it alone.",
    ),
    (
        "Philippians 4:6",
        "Do not be anxious about anything. Turn each worry that comes up "
        "today into a short prayer.",
    ),
]


def run_seeds(app: Flask | None = None) -> list[int]:
    """Insert the sample devotionals and return their ids."""
    app = app or create_app()
    store = app.extensions[STORE_EXTENSION]
    with app.app_context():
        ids = [store.create(verse, content) for verse, content in SAMPLE_DEVOTIONALS]
    logger.info("Seed data inserted successfully: %s", ids)
    return ids


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    run_seeds()
