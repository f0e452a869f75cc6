import pytest

from src.tasks.schemas import Task, parse_done


@pytest.mark.parametrize(
    "value, expected",
    [
        ("yes", True),
        ("on", True),
        ("YES", True),
        ("On", True),
        ("no", False),
        ("off", False),
        ("true", False),
        ("", False),
        (None, False),
    ],
)
def test_parse_done(value: str | None, expected: bool) -> None:
    assert parse_done(value) is expected


def test_task_defaults_to_not_done() -> None:
    assert Task(id=1, description="buy milk").done is False


def test_task_accepts_any_stored_id() -> None:
    assert Task(id=-1, description="imported elsewhere").id == -1
