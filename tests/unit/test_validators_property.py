"""Property-based tests for request schema validation."""

import pytest
from hypothesis import given
from hypothesis import strategies as st
from pydantic import ValidationError

from src.taskboard.models import TaskStatus
from src.taskboard.schemas.comment import CommentCreate
from src.taskboard.schemas.project import ProjectCreate, ProjectUpdate
from src.taskboard.schemas.task import TaskCreate, TaskUpdate

pytestmark = pytest.mark.unit

whitespace = st.text(alphabet=" \t\n\r", min_size=1, max_size=20)
names = st.text(alphabet=st.characters(categories=("L", "N")), min_size=1, max_size=100)
padding = st.sampled_from(["", " ", "  \t", "\n "])


@given(whitespace)
def test_whitespace_project_name_rejected(name: str) -> None:
    with pytest.raises(ValidationError):
        ProjectCreate(name=name)


@given(names, padding)
def test_project_name_is_stripped(name: str, pad: str) -> None:
    assert ProjectCreate(name=pad + name + pad).name == name


@given(whitespace)
def test_whitespace_task_title_rejected(title: str) -> None:
    with pytest.raises(ValidationError):
        TaskCreate(title=title)


@given(st.text(min_size=1, max_size=30).filter(lambda s: s not in {m.value for m in TaskStatus}))
def test_unknown_status_rejected(value: str) -> None:
    with pytest.raises(ValidationError):
        TaskCreate(title="Task", status=value)


@given(st.sampled_from(list(TaskStatus)))
def test_status_stored_as_plain_value(status: TaskStatus) -> None:
    assert TaskCreate(title="Task", status=status.value).status == status.value


def test_task_status_defaults_to_todo() -> None:
    assert TaskCreate(title="Task").status == "todo"


def test_update_rejects_explicit_nulls() -> None:
    with pytest.raises(ValidationError):
        TaskUpdate(title=None)
    with pytest.raises(ValidationError):
        TaskUpdate(status=None)
    with pytest.raises(ValidationError):
        ProjectUpdate(name=None)


def test_update_tracks_only_supplied_fields() -> None:
    assert TaskUpdate(status="done").model_dump(exclude_unset=True) == {"status": "done"}
    assert TaskUpdate().model_dump(exclude_unset=True) == {}


@given(whitespace)
def test_whitespace_comment_rejected(content: str) -> None:
    with pytest.raises(ValidationError):
        CommentCreate(content=content)
