from pydantic import BaseModel


class Task(BaseModel):
    id: int
    description: str
    done: bool = False


DONE_VALUES = ("yes", "on")


def parse_done(value: str | None) -> bool:
    """Coerce a checkbox-style form value into a boolean.

    "yes" and "on" (any case) mean done; every other value, including a
    missing field, means not done.
    """
    if value is None:
        return False
    return value.strip().lower() in DONE_VALUES
