import pytest

from core.errors import BoardNotFound, ProjectNotFound, ServerFailure
from crud import list_crud
from models.board import Board
from models.task import Task
from models.task_list import TaskList
from services import boards, projects, tasks


def test_create_board_provisions_default_lists(db, alice):
    board = boards.create_board(db, alice, "Board")
    assert board.owner_id == alice.user_id
    assert board.project_id is None
    assert [(l.title, l.position) for l in board.lists] == [
        ("Todo", 0),
        ("In Progress", 1),
        ("Complete", 2),
    ]


def test_create_board_under_own_project(db, alice):
    project = projects.create_project(db, alice, "Demo")
    board = boards.create_board(db, alice, "Board", project_id=project.id)
    assert board.project_id == project.id


def test_create_board_under_foreign_project_is_project_not_found(db, alice, bob):
    project = projects.create_project(db, alice, "Demo")
    with pytest.raises(ProjectNotFound):
        boards.create_board(db, bob, "Sneaky", project_id=project.id)
    assert db.query(Board).count() == 0


def test_board_creation_is_atomic(db, alice, monkeypatch):
    def fail(*args, **kwargs):
        raise RuntimeError("list insert failed")

    monkeypatch.setattr(list_crud, "add_lists", fail)

    with pytest.raises(ServerFailure) as exc_info:
        boards.create_board(db, alice, "Board")
    assert exc_info.value.message == "Failed to create board"
    assert db.query(Board).count() == 0
    assert db.query(TaskList).count() == 0


def test_list_boards_filters_and_orders(db, alice, bob):
    project = projects.create_project(db, alice, "Demo")
    standalone = boards.create_board(db, alice, "Standalone")
    attached = boards.create_board(db, alice, "Attached", project_id=project.id)
    boards.create_board(db, bob, "Bob's")

    assert [b.id for b in boards.list_boards(db, alice)] == [attached.id, standalone.id]
    assert [b.id for b in boards.list_boards(db, alice, project_id=project.id)] == [attached.id]

    boards.update_board(db, alice, standalone.id, {"name": "Touched"})
    assert [b.id for b in boards.list_boards(db, alice)] == [standalone.id, attached.id]


def test_get_board_expands_lists_and_tasks_in_order(db, alice):
    board = boards.create_board(db, alice, "Board")
    todo = board.lists[0]
    tasks.create_task(db, alice, todo.id, "second", 5)
    tasks.create_task(db, alice, todo.id, "first", 1)

    detail = boards.get_board(db, alice, board.id)
    assert [l.title for l in detail.lists] == ["Todo", "In Progress", "Complete"]
    assert [t.title for t in detail.lists[0].tasks] == ["first", "second"]
    assert detail.lists[1].tasks == []


def test_partial_update_semantics(db, alice):
    project = projects.create_project(db, alice, "Demo")
    board = boards.create_board(db, alice, "Board", project_id=project.id)

    renamed = boards.update_board(db, alice, board.id, {"name": "X"})
    assert renamed.name == "X"
    assert renamed.project_id == project.id

    unchanged = boards.update_board(db, alice, board.id, {})
    assert unchanged.name == "X"
    assert unchanged.project_id == project.id

    detached = boards.update_board(db, alice, board.id, {"project_id": None})
    assert detached.project_id is None
    assert detached.name == "X"


def test_update_board_into_foreign_project_fails(db, alice, bob):
    board = boards.create_board(db, alice, "Board")
    foreign = projects.create_project(db, bob, "Bob's")
    with pytest.raises(ProjectNotFound):
        boards.update_board(db, alice, board.id, {"project_id": foreign.id})
    assert boards.get_board(db, alice, board.id).project_id is None


def test_delete_board_cascades(db, alice):
    board = boards.create_board(db, alice, "Board")
    tasks.create_task(db, alice, board.lists[0].id, "T", 0)
    board_id = board.id
    boards.delete_board(db, alice, board_id)
    assert db.query(TaskList).count() == 0
    assert db.query(Task).count() == 0
    with pytest.raises(BoardNotFound):
        boards.delete_board(db, alice, board_id)


@pytest.mark.parametrize(
    "call",
    [
        lambda db, p, bid: boards.get_board(db, p, bid),
        lambda db, p, bid: boards.update_board(db, p, bid, {"name": "Stolen"}),
        lambda db, p, bid: boards.delete_board(db, p, bid),
    ],
    ids=["get", "update", "delete"],
)
def test_foreign_board_is_not_found(db, alice, bob, call):
    board = boards.create_board(db, alice, "Private")
    with pytest.raises(BoardNotFound):
        call(db, bob, board.id)
    with pytest.raises(BoardNotFound):
        call(db, bob, 99999)
    assert boards.get_board(db, alice, board.id).name == "Private"


def test_board_routes(client, alice_headers):
    project = client.post("/projects/", json={"name": "Demo"}, headers=alice_headers).json()

    resp = client.post("/boards/", json={"name": "Board", "projectId": project["id"]}, headers=alice_headers)
    assert resp.status_code == 201
    board = resp.json()
    assert board["projectId"] == project["id"]
    assert [(l["title"], l["position"]) for l in board["lists"]] == [
        ("Todo", 0),
        ("In Progress", 1),
        ("Complete", 2),
    ]

    filtered = client.get("/boards/", params={"projectId": project["id"]}, headers=alice_headers).json()
    assert [b["id"] for b in filtered] == [board["id"]]

    detail = client.get(f"/boards/{board['id']}", headers=alice_headers).json()
    assert all(l["tasks"] == [] for l in detail["lists"])

    resp = client.patch(f"/boards/{board['id']}", json={"projectId": None}, headers=alice_headers)
    assert resp.status_code == 200
    assert resp.json()["projectId"] is None

    assert client.delete(f"/boards/{board['id']}", headers=alice_headers).status_code == 204
    assert client.get(f"/boards/{board['id']}", headers=alice_headers).json() == {"detail": "Board not found"}


def test_board_routes_hide_foreign_projects(client, alice_headers, bob_headers):
    project = client.post("/projects/", json={"name": "Demo"}, headers=alice_headers).json()
    resp = client.post("/boards/", json={"name": "Sneaky", "projectId": project["id"]}, headers=bob_headers)
    assert resp.status_code == 404
    assert resp.json() == {"detail": "Project not found"}


def test_board_routes_require_authentication(client):
    resp = client.get("/boards/")
    assert resp.status_code == 401
    assert resp.json() == {"detail": "Not authenticated"}
