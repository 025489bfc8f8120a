import logging

import mongomock
import pytest

from bson.objectid import ObjectId

from mongodel.config import ConnectionConfig

from tests.utils import DOC_ID, MONGO_ENV


@pytest.fixture
def config():
    return ConnectionConfig(
        user="u",
        password="p",
        host="localhost",
        port="27017",
        database="db",
        collection="coll",
    )


@pytest.fixture
def mongo_client():
    return mongomock.MongoClient()


@pytest.fixture
def coll(mongo_client):
    return mongo_client["db"]["coll"]


@pytest.fixture
def stored_doc(coll):
    coll.insert_one({"_id": ObjectId(DOC_ID), "item": "jacket", "qty": 48})
    coll.insert_one({"item": "notebook", "qty": 50})
    return DOC_ID


@pytest.fixture
def client_calls(monkeypatch, mongo_client):
    """Route every MongoClient created by mongodel to the mongomock client."""
    calls = []

    def factory(*args, **kwargs):
        calls.append((args, kwargs))
        return mongo_client

    monkeypatch.setattr("mongodel.database.MongoClient", factory)
    return calls


@pytest.fixture
def mongo_env(monkeypatch, tmp_path):
    for key, value in MONGO_ENV.items():
        monkeypatch.setenv(key, value)
    monkeypatch.delenv("MONGO_AUTHSOURCE", raising=False)
    monkeypatch.delenv("MONGO_URI", raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(
        "mongodel.utilities.db_utilities.CONFIG_FILE_DIR", str(tmp_path)
    )
    return tmp_path


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logger = logging.getLogger("mongodel")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
