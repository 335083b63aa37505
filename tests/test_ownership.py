import pytest

from core.errors import BoardNotFound, ListNotFound, ProjectNotFound, TargetListNotFound, TaskNotFound
from services import boards, projects, tasks
from services import ownership
from services.ownership import ResourceType


@pytest.fixture
def tree(db, alice):
    """Alice's project -> board (with default lists) -> one task in Todo."""
    project = projects.create_project(db, alice, "Demo")
    board = boards.create_board(db, alice, "Board", project_id=project.id)
    todo = board.lists[0]
    task = tasks.create_task(db, alice, todo.id, "T", 0)
    return {
        ResourceType.PROJECT: project.id,
        ResourceType.BOARD: board.id,
        ResourceType.LIST: todo.id,
        ResourceType.TASK: task.id,
    }


@pytest.mark.parametrize("resource_type", list(ResourceType))
def test_owner_is_authorized(db, alice, tree, resource_type):
    decision = ownership.authorize(db, alice, resource_type, tree[resource_type])
    assert decision.authorized
    assert decision.resource.id == tree[resource_type]


@pytest.mark.parametrize("resource_type", list(ResourceType))
def test_foreign_owner_matches_missing_id(db, bob, tree, resource_type):
    foreign = ownership.authorize(db, bob, resource_type, tree[resource_type])
    missing = ownership.authorize(db, bob, resource_type, 99999)
    assert foreign == missing == ownership.DENIED


def test_task_resolution_carries_ancestor_chain(db, alice, tree):
    decision = ownership.authorize(db, alice, ResourceType.TASK, tree[ResourceType.TASK])
    lst, board = decision.ancestors
    assert lst.id == tree[ResourceType.LIST]
    assert board.id == tree[ResourceType.BOARD]
    assert board.owner_id == alice.user_id


def test_list_resolution_carries_board(db, alice, tree):
    decision = ownership.authorize(db, alice, ResourceType.LIST, tree[ResourceType.LIST])
    (board,) = decision.ancestors
    assert board.id == tree[ResourceType.BOARD]


@pytest.mark.parametrize(
    "resource_type, error",
    [
        (ResourceType.PROJECT, ProjectNotFound),
        (ResourceType.BOARD, BoardNotFound),
        (ResourceType.LIST, ListNotFound),
        (ResourceType.TASK, TaskNotFound),
    ],
)
def test_require_raises_type_specific_not_found(db, bob, tree, resource_type, error):
    with pytest.raises(error):
        ownership.require(db, bob, resource_type, tree[resource_type])


def test_require_accepts_override_error(db, bob, tree):
    with pytest.raises(TargetListNotFound) as exc_info:
        ownership.require(db, bob, ResourceType.LIST, tree[ResourceType.LIST], error=TargetListNotFound)
    assert exc_info.value.message == "Target list not found"
