import os
import tempfile

# Importing backend.main builds the module-level app; keep its files out of the source tree
os.environ.setdefault("DATA_DIR", tempfile.mkdtemp(prefix="dairy-storefront-"))

import pytest
from fastapi.testclient import TestClient

from backend.main import create_app
from backend.notifier import SmsNotifier
from backend.store import CatalogStore, OrderStore


class FakeMessages:
    def __init__(self, error=None):
        self.error = error
        self.sent = []

    def create(self, body, from_, to):
        if self.error is not None:
            raise self.error
        self.sent.append({"body": body, "from_": from_, "to": to})
        return type("Message", (), {"sid": f"SM{len(self.sent):04d}"})()


class FakeTwilioClient:
    def __init__(self, error=None):
        self.messages = FakeMessages(error)


@pytest.fixture()
def sms_client():
    return FakeTwilioClient()


@pytest.fixture()
def notifier(sms_client):
    return SmsNotifier(sms_client, "+15550001111", "+919800000000")


@pytest.fixture()
def catalog_store(tmp_path):
    return CatalogStore(tmp_path / "products.json")


@pytest.fixture()
def order_store(tmp_path):
    return OrderStore(tmp_path / "orders.json")


@pytest.fixture()
def app(tmp_path, notifier):
    return create_app(data_dir=tmp_path, notifier=notifier)


@pytest.fixture()
def client(app):
    return TestClient(app)
