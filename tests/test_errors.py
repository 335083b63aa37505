import pytest
from sqlalchemy.exc import OperationalError

from core.config import settings
from core.errors import (
    BoardNotFound,
    Conflict,
    ServerFailure,
    StatusCategory,
    TargetListNotFound,
    Unauthenticated,
    guarded,
    report,
)
from crud import board_crud


@pytest.mark.parametrize(
    "exc, expected",
    [
        (Unauthenticated(), ("Not authenticated", StatusCategory.UNAUTHENTICATED)),
        (BoardNotFound(), ("Board not found", StatusCategory.NOT_FOUND)),
        (TargetListNotFound(), ("Target list not found", StatusCategory.NOT_FOUND)),
        (Conflict("taken"), ("taken", StatusCategory.CONFLICT)),
        (ServerFailure("Failed to fetch boards"), ("Failed to fetch boards", StatusCategory.SERVER)),
        (RuntimeError("db password is hunter2"), ("Operation failed", StatusCategory.SERVER)),
    ],
)
def test_report_maps_to_closed_taxonomy(exc, expected):
    assert report(exc) == expected


def test_guarded_passes_tagged_errors_through():
    @guarded("Failed to do it")
    def op():
        raise BoardNotFound()

    with pytest.raises(BoardNotFound):
        op()


def test_guarded_wraps_untagged_errors():
    cause = ValueError("raw store text")

    @guarded("Failed to do it")
    def op():
        raise cause

    with pytest.raises(ServerFailure) as exc_info:
        op()
    assert exc_info.value.message == "Failed to do it"
    assert exc_info.value.cause is cause
    assert exc_info.value.status_code == 500


def _break_board_listing(monkeypatch):
    def fail(*args, **kwargs):
        raise OperationalError("SELECT 1", {}, Exception("connection refused to db-internal:3306"))

    monkeypatch.setattr(board_crud, "list_boards", fail)


def test_store_failure_is_opaque_outside_development(client, alice_headers, monkeypatch):
    _break_board_listing(monkeypatch)
    resp = client.get("/boards/", headers=alice_headers)
    assert resp.status_code == 500
    assert resp.json() == {"detail": "Failed to fetch boards"}


def test_store_failure_text_shown_in_development(client, alice_headers, monkeypatch):
    _break_board_listing(monkeypatch)
    monkeypatch.setattr(settings, "ENVIRONMENT", "development")
    resp = client.get("/boards/", headers=alice_headers)
    assert resp.status_code == 500
    body = resp.json()
    assert body["detail"] == "Failed to fetch boards"
    assert "connection refused" in body["error"]


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"
