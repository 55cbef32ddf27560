"""Tests for engine record schemas (wire aliases, derived properties)."""

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from flowable_client.schemas import (
    Attachment,
    NewUserForm,
    Page,
    Process,
    ProcessListQuery,
    SubmitTaskForm,
    Task,
    TaskListQuery,
    UserInfo,
)


def test_task_decodes_camel_case_fields() -> None:
    task = Task.model_validate(
        {
            "id": "t1",
            "name": "Approve",
            "assignee": "u1",
            "formKey": "approve-form",
            "taskDefinitionKey": "approve",
            "processInstanceId": "p1",
            "processDefinitionId": "leave:1:4",
            "startTime": "2024-01-02T10:00:00.000+0000",
            "claimTime": "2024-01-02T11:00:00.000+0000",
            "dueDate": None,
            "endTime": None,
            "variables": [{"name": "days", "value": 3, "scope": "local"}],
            "somethingNew": "ignored",
        }
    )
    assert task.form_key == "approve-form"
    assert task.process_instance_id == "p1"
    assert task.assignee_user is None
    assert not task.is_finished
    assert task.created_at == datetime(2024, 1, 2, 10, 0, tzinfo=UTC)
    assert task.claimed_at == datetime(2024, 1, 2, 11, 0, tzinfo=UTC)
    assert task.due_at is None


def test_task_form_values_last_submission_wins() -> None:
    task = Task.model_validate(
        {
            "id": "t1",
            "variables": [
                {"name": "days", "value": 3},
                {"name": "reason", "value": "trip"},
                {"name": "days", "value": 5},
            ],
        }
    )
    assert task.form_values == {"days": 5, "reason": "trip"}


def test_task_with_end_time_is_finished() -> None:
    task = Task(id="t1", end_time="2024-01-03T00:00:00.000+0000")
    assert task.is_finished
    assert task.ended_at == datetime(2024, 1, 3, tzinfo=UTC)


def test_process_suspended_flag_accepts_string_and_bool() -> None:
    assert Process.model_validate({"id": "p1", "suspended": "true"}).suspended is True
    assert Process.model_validate({"id": "p1", "suspended": False}).suspended is False
    assert Process.model_validate({"id": "p1"}).suspended is None


def test_process_decodes_start_user() -> None:
    process = Process.model_validate(
        {"id": "p1", "startUserId": "u1", "businessKey": "LR-1", "processDefinitionUrl": "http://x"}
    )
    assert process.start_user_id == "u1"
    assert process.business_key == "LR-1"
    assert process.started_by is None


def test_user_info_is_frozen() -> None:
    user = UserInfo(id="u1", first_name="Ann")
    with pytest.raises(ValidationError):
        user.first_name = "Bob"


def test_user_info_display_name() -> None:
    assert UserInfo(id="u1", first_name="Ann", last_name="Lee").display_name == "Ann Lee"
    assert UserInfo(id="u1").display_name == "u1"


def test_attachment_defaults() -> None:
    attachment = Attachment.model_validate({"id": "c1", "mimeType": "text/plain"})
    assert attachment.mime_type == "text/plain"
    assert attachment.content_available is False


def test_page_accounting_properties() -> None:
    page = Page[Task].model_validate({"data": [{"id": "t1"}, {"id": "t2"}], "total": 5, "start": 2, "size": 2})
    assert page.next_start == 4
    assert page.has_more
    assert page.is_consistent


def test_page_inconsistent_when_data_overruns_total() -> None:
    page = Page[Task].model_validate({"data": [{"id": "t1"}, {"id": "t2"}], "total": 1, "start": 0})
    assert not page.is_consistent
    assert not page.has_more


def test_empty_page_has_no_more() -> None:
    page = Page[UserInfo].model_validate({"data": [], "total": 10, "start": 10})
    assert not page.has_more


def test_task_list_query_wire_params() -> None:
    query = TaskListQuery(process_instance_id="p1", start=20, size=5)
    assert query.to_wire() == {"processInstanceId": "p1", "start": 20, "size": 5}


def test_process_list_query_rejects_negative_start() -> None:
    with pytest.raises(ValidationError):
        ProcessListQuery(involved_user="u1", start=-1)


def test_submit_task_form_from_pairs_keeps_order() -> None:
    form = SubmitTaskForm.from_pairs("t1", [("z", 1), ("a", 2)])
    assert [p.id for p in form.properties] == ["z", "a"]


def test_new_user_form_repr_hides_password() -> None:
    form = NewUserForm(id="u1", email="ann@acme.org", password="s3cret")
    assert "s3cret" not in repr(form)


def test_new_user_form_rejects_invalid_email() -> None:
    with pytest.raises(ValidationError):
        NewUserForm(id="u1", email="not-an-email", password="pw")
