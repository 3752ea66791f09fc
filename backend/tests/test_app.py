from __future__ import annotations

from unittest.mock import MagicMock

from fastapi.testclient import TestClient
from pymongo.errors import ServerSelectionTimeoutError

from app.main import create_app


def test_server_starts_when_database_is_unreachable(caplog):
    mongo_client = MagicMock()
    mongo_client.admin.command.side_effect = ServerSelectionTimeoutError("no servers")
    app = create_app(mongo_client=mongo_client)

    with TestClient(app) as client:
        response = client.get("/")

        assert response.status_code == 200
        assert response.text == "Route is working"
        assert not mongo_client.close.called

    mongo_client.admin.command.assert_called_once_with("ping")
    assert "Database connection failed" in caplog.text
    assert mongo_client.close.called


def test_client_closed_on_shutdown_after_successful_ping():
    mongo_client = MagicMock()
    app = create_app(mongo_client=mongo_client)

    with TestClient(app):
        pass

    mongo_client.close.assert_called_once_with()
