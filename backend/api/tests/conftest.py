import json

import pytest

from api.store import reset_store


@pytest.fixture(autouse=True)
def fresh_store():
    reset_store()
    yield
    reset_store()


@pytest.fixture(params=["database", "memory"])
def backend(request, settings, db):
    settings.CHAT_STORE_BACKEND = request.param
    reset_store()
    return request.param


@pytest.fixture
def post_json(client):
    def post(url, payload):
        body = payload if isinstance(payload, (str, bytes)) else json.dumps(payload)
        return client.post(url, data=body, content_type="application/json")

    return post
