import base64
import json

import pytest
import respx
from httpx import Response
from freelo_mcp.core.client import Credentials, FreeloClient
from freelo_mcp.core.errors import FreeloHTTPError, InvalidInputError
from freelo_mcp.models import (
    CommentCreateInput,
    PinItemInput,
    ProjectCreateInput,
    ReminderInput,
    TaskFilters,
)
from freelo_mcp.tools import (
    comments,
    files,
    labels,
    pinned_items,
    projects,
    tasklists,
    tasks,
    time_tracking,
    users,
)
from pydantic import ValidationError

BASE = "https://api.freelo.io/v1"


@pytest.fixture
def client():
    return FreeloClient(credentials=Credentials(email="a@b.c", api_key="k"))


def _sent_json(route, index=0):
    return json.loads(route.calls[index].request.read())


@pytest.mark.asyncio
async def test_get_all_projects_maps_page_to_p(client):
    async with respx.mock:
        route = respx.get(f"{BASE}/all-projects").mock(
            return_value=Response(200, json={"data": {"projects": []}})
        )
        async with client:
            result = await projects.get_all_projects(client, page=2)

    assert result == {"data": {"projects": []}}
    assert route.calls[0].request.url.params["p"] == "2"


@pytest.mark.asyncio
async def test_create_project_coerces_owner_and_drops_unset(client):
    async with respx.mock:
        route = respx.post(f"{BASE}/projects").mock(
            return_value=Response(200, json={"id": 9})
        )
        async with client:
            data = ProjectCreateInput(name="New", currency_iso="EUR", project_owner_id=15)
            result = await projects.create_project(client, data)

    assert result == {"id": 9}
    assert _sent_json(route) == {
        "name": "New",
        "currency_iso": "EUR",
        "project_owner_id": "15",
    }


def test_project_input_rejects_unknown_currency():
    with pytest.raises(ValidationError):
        ProjectCreateInput(name="x", currency_iso="GBP")


@pytest.mark.asyncio
async def test_remove_workers_posts_user_ids(client):
    async with respx.mock:
        route = respx.post(f"{BASE}/project/3/remove-workers/by-ids").mock(
            return_value=Response(200, json={"result": "success"})
        )
        async with client:
            await projects.remove_workers(client, "3", ["11", "12"])

    assert _sent_json(route) == {"users_ids": ["11", "12"]}


@pytest.mark.asyncio
async def test_create_tasklist_from_template_body(client):
    async with respx.mock:
        route = respx.post(f"{BASE}/tasklist/create-from-template/77").mock(
            return_value=Response(200, json={"id": 1})
        )
        async with client:
            await tasklists.create_tasklist_from_template(client, 77, 5)

    assert _sent_json(route) == {"tasklist_id": 77, "target_project_id": 5}


@pytest.mark.asyncio
async def test_get_tasklist_tasks_default_order(client):
    async with respx.mock:
        route = respx.get(f"{BASE}/project/1/tasklist/2/tasks").mock(
            return_value=Response(200, json=[])
        )
        async with client:
            await tasks.get_tasklist_tasks(client, "1", "2")

    params = route.calls[0].request.url.params
    assert params["order_by"] == "priority"
    assert params["order"] == "asc"


@pytest.mark.asyncio
async def test_get_all_tasks_encodes_filters(client):
    async with respx.mock:
        route = respx.get(f"{BASE}/all-tasks").mock(
            return_value=Response(200, json={"data": {"tasks": []}})
        )
        async with client:
            filters = TaskFilters(
                projects_ids=[1, 2],
                due_date_range={"date_from": "2024-01-01"},
                p=1,
            )
            await tasks.get_all_tasks(client, filters)

    params = route.calls[0].request.url.params
    assert params.get_list("projects_ids[]") == ["1", "2"]
    assert params["due_date_range[date_from]"] == "2024-01-01"
    assert params["p"] == "1"


@pytest.mark.asyncio
async def test_create_task_reminder_body(client):
    async with respx.mock:
        route = respx.post(f"{BASE}/task/5/reminder").mock(
            return_value=Response(200, json={"result": "success"})
        )
        async with client:
            reminder = ReminderInput(date="2024-06-01T09:00:00+02:00", user_ids=["4"])
            await tasks.create_task_reminder(client, "5", reminder)

    assert _sent_json(route) == {
        "remind_at": "2024-06-01T09:00:00+02:00",
        "user_ids": ["4"],
    }


@pytest.mark.asyncio
async def test_create_comment_forwards_files(client):
    async with respx.mock:
        route = respx.post(f"{BASE}/task/123/comments").mock(
            return_value=Response(200, json={"id": 1677})
        )
        async with client:
            data = CommentCreateInput(
                content="Comment content...",
                files=[{"download_url": "https://x/a.txt", "filename": "a.txt"}],
            )
            result = await comments.create_comment(client, "123", data)

    assert result == {"id": 1677}
    assert _sent_json(route) == {
        "content": "Comment content...",
        "files": [{"download_url": "https://x/a.txt", "filename": "a.txt"}],
    }


@pytest.mark.asyncio
async def test_add_labels_to_task_wraps_uuids(client):
    async with respx.mock:
        route = respx.post(f"{BASE}/task-labels/add-to-task/8").mock(
            return_value=Response(200, json={"result": "success"})
        )
        async with client:
            await labels.add_labels_to_task(client, "8", ["u-1", "u-2"])

    assert _sent_json(route) == {"labels": [{"uuid": "u-1"}, {"uuid": "u-2"}]}


@pytest.mark.asyncio
async def test_invite_users_by_ids_body(client):
    async with respx.mock:
        route = respx.post(f"{BASE}/users/manage-workers").mock(
            return_value=Response(200, json={"result": "success"})
        )
        async with client:
            await users.invite_users_by_ids(client, "4", ["7"])

    assert _sent_json(route) == {"projects_ids": ["4"], "users_ids": ["7"]}


@pytest.mark.asyncio
async def test_pin_item_defaults_link(client):
    async with respx.mock:
        route = respx.post(f"{BASE}/project/2/pinned-items").mock(
            return_value=Response(200, json={"id": 1})
        )
        async with client:
            await pinned_items.pin_item(
                client, "2", PinItemInput(type="task", item_id="55")
            )

    assert _sent_json(route) == {"type": "task", "item_id": "55", "link": "#"}


@pytest.mark.asyncio
async def test_start_time_tracking_uses_query(client):
    async with respx.mock:
        route = respx.post(f"{BASE}/timetracking/start").mock(
            return_value=Response(200, json={"uuid": "t-1"})
        )
        async with client:
            await time_tracking.start_time_tracking(client, task_id="31")

    req = route.calls[0].request
    assert req.url.params["task_id"] == "31"
    assert req.read() == b""


@pytest.mark.asyncio
async def test_upload_file_decodes_base64(client):
    async with respx.mock:
        route = respx.post(f"{BASE}/file/upload").mock(
            return_value=Response(200, json={"uuid": "f-9"})
        )
        async with client:
            result = await files.upload_file(
                client, base64.b64encode(b"payload").decode(), "p.bin"
            )

    assert result == {"uuid": "f-9"}
    body = route.calls[0].request.read()
    assert b'filename="p.bin"' in body
    assert b"payload" in body


@pytest.mark.asyncio
async def test_upload_file_rejects_bad_base64(client):
    async with client:
        with pytest.raises(InvalidInputError):
            await files.upload_file(client, "***not base64***", "x.bin")


@pytest.mark.asyncio
async def test_download_file_returns_base64(client):
    async with respx.mock:
        respx.get(f"{BASE}/file/abc").mock(
            return_value=Response(
                200, content=b"\x00\x01", headers={"Content-Type": "image/png"}
            )
        )
        async with client:
            result = await files.download_file(client, "abc")

    assert result == {
        "filename": "abc",
        "contentType": "image/png",
        "data": base64.b64encode(b"\x00\x01").decode(),
    }


@pytest.mark.asyncio
async def test_upstream_error_propagates_from_tool(client):
    async with respx.mock:
        respx.get(f"{BASE}/project/404").mock(
            return_value=Response(404, json={"errors": ["Not found"]})
        )
        async with client:
            with pytest.raises(FreeloHTTPError):
                await projects.get_project_details(client, "404")
