from datetime import datetime, timezone
from unittest import mock

import pytest
from bson import ObjectId
from pymongo import ReturnDocument

from database import connection
from repositories import user_repository
from models.user import SafeUser, to_iso_utc


@pytest.fixture
def collection(monkeypatch):
    coll = mock.MagicMock(name="users")
    monkeypatch.setattr(user_repository, "users_collection", lambda: coll)
    return coll


def test_serialize_user_drops_password():
    user_id = ObjectId()
    doc = {"_id": user_id, "username": "user1", "password": "hash"}

    assert user_repository.serialize_user(doc) == {"_id": user_id, "username": "user1"}
    assert "password" in doc
    assert user_repository.serialize_user(None) is None


def test_insert_user_returns_safe_document(collection):
    new_id = ObjectId()
    collection.insert_one.return_value = mock.Mock(inserted_id=new_id)

    result = user_repository.insert_user({"username": "user1", "password": "hash"})

    assert result == {"_id": new_id, "username": "user1"}


def test_reads_exclude_password(collection):
    collection.find.return_value = [{"_id": ObjectId(), "username": "user1"}]

    user_repository.find_user_by_username("user1")
    user_repository.find_all_users()

    collection.find_one.assert_called_once_with({"username": "user1"}, {"password": 0})
    collection.find.assert_called_once_with({}, {"password": 0})


def test_update_user_fields_returns_document_after_update(collection):
    collection.find_one_and_update.return_value = {"_id": ObjectId(), "username": "user1", "biography": "bio"}

    result = user_repository.update_user_fields("user1", {"biography": "bio"})

    collection.find_one_and_update.assert_called_once_with(
        {"username": "user1"},
        {"$set": {"biography": "bio"}},
        projection={"password": 0},
        return_document=ReturnDocument.AFTER,
    )
    assert result["biography"] == "bio"


def test_delete_user_missing_returns_none(collection):
    collection.find_one_and_delete.return_value = None

    assert user_repository.delete_user("ghost") is None


def test_build_mongo_uri(monkeypatch):
    settings = connection.settings
    monkeypatch.setattr(settings, "MONGO_URI", "")
    monkeypatch.setattr(settings, "MONGO_HOST", "db")
    monkeypatch.setattr(settings, "MONGO_PORT", "27018")
    monkeypatch.setattr(settings, "MONGO_USER", None)
    monkeypatch.setattr(settings, "MONGO_PASSWORD", None)
    assert connection.build_mongo_uri() == "mongodb://db:27018"

    monkeypatch.setattr(settings, "MONGO_USER", "app")
    monkeypatch.setattr(settings, "MONGO_PASSWORD", "pw")
    assert connection.build_mongo_uri() == "mongodb://app:pw@db:27018"

    monkeypatch.setattr(settings, "MONGO_URI", "mongodb+srv://cluster.example.net")
    assert connection.build_mongo_uri() == "mongodb+srv://cluster.example.net"


def test_safe_user_json_shape():
    user_id = ObjectId()
    user = SafeUser.model_validate(
        {"_id": user_id, "username": "user1", "password": "hash", "dateJoined": datetime(2024, 12, 3)}
    )

    assert user.to_json() == {
        "_id": str(user_id),
        "username": "user1",
        "dateJoined": "2024-12-03T00:00:00.000Z",
    }


def test_to_iso_utc_converts_aware_datetimes():
    from datetime import timedelta

    value = datetime(2024, 12, 3, 2, 30, tzinfo=timezone(timedelta(hours=2)))

    assert to_iso_utc(value) == "2024-12-03T00:30:00.000Z"


def test_log_level_is_case_insensitive(monkeypatch):
    import importlib
    import logging

    import main

    basic_config = mock.Mock()
    monkeypatch.setattr(logging, "basicConfig", basic_config)
    monkeypatch.setattr(main.settings, "LOG_LEVEL", "info")

    importlib.reload(main)

    assert basic_config.call_args.kwargs["level"] == "INFO"
