import os
import sys

import pytest

# Ensure repository root importable early
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from labyrinth import create_app  # noqa: E402
from labyrinth.routes.level_api import clear_cache  # noqa: E402


@pytest.fixture()
def test_app():
    app = create_app({"TESTING": True, "LABYRINTH_DISABLE_CACHE": False, "LABYRINTH_MAX_HALF_SIZE": 6})
    return app


@pytest.fixture()
def client(test_app):
    clear_cache()
    return test_app.test_client()
