from __future__ import annotations

from ..client import FreeloClient, FreeloResponse
from . import Body, Params, segment, unwrap_collection, with_params

TOOL = "tasklists"


async def create_tasklist(
    client: FreeloClient, project_id, body: Body
) -> FreeloResponse:
    return await client.post(
        f"/project/{segment(project_id)}/tasklists", json=body, tool=TOOL
    )


async def get_project_tasklists(
    client: FreeloClient, project_id, params: Params = None
) -> FreeloResponse:
    """Tasklists of one project, read through /all-tasklists.

    Returns the bare tasklist array when upstream wraps it in a paginated
    envelope, otherwise the upstream body as is.
    """
    resp = await client.get(
        "/all-tasklists",
        params=with_params(params, projects_ids=[project_id]),
        tool=TOOL,
    )
    return unwrap_collection(resp, "tasklists")


async def get_all_tasklists(
    client: FreeloClient, params: Params = None
) -> FreeloResponse:
    return await client.get("/all-tasklists", params=params, tool=TOOL)


async def get_assignable_workers(
    client: FreeloClient, project_id, tasklist_id
) -> FreeloResponse:
    return await client.get(
        f"/project/{segment(project_id)}/tasklist/{segment(tasklist_id)}"
        "/assignable-workers",
        tool=TOOL,
    )


async def get_tasklist(client: FreeloClient, tasklist_id) -> FreeloResponse:
    return await client.get(f"/tasklist/{segment(tasklist_id)}", tool=TOOL)


async def create_tasklist_from_template(
    client: FreeloClient, template_id, body: Body
) -> FreeloResponse:
    return await client.post(
        f"/tasklist/create-from-template/{segment(template_id)}", json=body, tool=TOOL
    )
