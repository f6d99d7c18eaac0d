import os
import sys
from datetime import datetime
from pathlib import Path

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

os.environ.setdefault("ENV", "test")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

from main import app


USER_ID = ObjectId()


@pytest.fixture
def client():
    # sin "with": el lifespan (conexión a Mongo) no se ejecuta
    return TestClient(app)


@pytest.fixture
def mock_safe_user():
    return {
        "_id": USER_ID,
        "username": "user1",
        "dateJoined": datetime(2024, 12, 3),
    }


@pytest.fixture
def mock_user_json():
    return {
        "_id": str(USER_ID),
        "username": "user1",
        "dateJoined": "2024-12-03T00:00:00.000Z",
    }
