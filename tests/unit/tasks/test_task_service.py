import pytest
from pytest_mock import MockerFixture

from src.common.exceptions import ResourceNotFoundException, ResourceType
from src.tasks.schemas import Task
from src.tasks.service import TaskService
from src.tasks.store.base import TaskStore


@pytest.fixture
def mock_task_store(mocker: MockerFixture) -> TaskStore:
    return mocker.Mock(spec=TaskStore)


@pytest.fixture
def task_service(mock_task_store: TaskStore) -> TaskService:
    return TaskService(task_store=mock_task_store)


@pytest.fixture
def sample_task() -> Task:
    return Task(id=1, description="buy milk", done=False)


def test_list_tasks(
    task_service: TaskService, mock_task_store: TaskStore, sample_task: Task
) -> None:
    mock_task_store.list_tasks.return_value = [sample_task]

    assert task_service.list_tasks() == [sample_task]


def test_get_task(
    task_service: TaskService, mock_task_store: TaskStore, sample_task: Task
) -> None:
    mock_task_store.get_task.return_value = sample_task

    assert task_service.get_task(1) == sample_task
    mock_task_store.get_task.assert_called_once_with(1)


def test_get_task_not_found(
    task_service: TaskService, mock_task_store: TaskStore
) -> None:
    mock_task_store.get_task.side_effect = ResourceNotFoundException(
        ResourceType.TASK, 7
    )

    with pytest.raises(ResourceNotFoundException):
        task_service.get_task(7)


def test_add_task(task_service: TaskService, mock_task_store: TaskStore) -> None:
    mock_task_store.insert_task.return_value = 3

    assert task_service.add_task("buy milk") == 3
    mock_task_store.insert_task.assert_called_once_with("buy milk")


def test_update_task_success(
    task_service: TaskService, mock_task_store: TaskStore
) -> None:
    mock_task_store.update_task.return_value = 1

    task_service.update_task(1, "buy milk", True)

    mock_task_store.update_task.assert_called_once_with(1, "buy milk", True)


def test_update_task_no_rows_affected(
    task_service: TaskService, mock_task_store: TaskStore
) -> None:
    mock_task_store.update_task.return_value = 0

    with pytest.raises(ResourceNotFoundException) as exc_info:
        task_service.update_task(5, "buy milk", False)

    assert exc_info.value.identifier == 5
    assert str(exc_info.value) == "Task with ID 5 not found"


def test_delete_task(task_service: TaskService, mock_task_store: TaskStore) -> None:
    mock_task_store.delete_task.return_value = 1

    task_service.delete_task(1)

    mock_task_store.delete_task.assert_called_once_with(1)


def test_delete_missing_task_is_not_an_error(
    task_service: TaskService, mock_task_store: TaskStore
) -> None:
    mock_task_store.delete_task.return_value = 0

    task_service.delete_task(99)

    mock_task_store.delete_task.assert_called_once_with(99)
