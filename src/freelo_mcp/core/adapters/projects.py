from __future__ import annotations

from ..client import FreeloClient, FreeloResponse
from . import Body, Params, segment

TOOL = "projects"


async def create_project(client: FreeloClient, body: Body) -> FreeloResponse:
    return await client.post("/projects", json=body, tool=TOOL)


async def get_projects(client: FreeloClient, params: Params = None) -> FreeloResponse:
    """Own active projects including their active tasklists."""
    return await client.get("/projects", params=params, tool=TOOL)


async def get_all_projects(
    client: FreeloClient, params: Params = None
) -> FreeloResponse:
    """Paginated list of every project the user can see (own and invited)."""
    return await client.get("/all-projects", params=params, tool=TOOL)


async def get_invited_projects(
    client: FreeloClient, params: Params = None
) -> FreeloResponse:
    return await client.get("/invited-projects", params=params, tool=TOOL)


async def get_archived_projects(
    client: FreeloClient, params: Params = None
) -> FreeloResponse:
    return await client.get("/archived-projects", params=params, tool=TOOL)


async def get_template_projects(
    client: FreeloClient, params: Params = None
) -> FreeloResponse:
    return await client.get("/template-projects", params=params, tool=TOOL)


async def get_user_projects(
    client: FreeloClient, user_id, params: Params = None
) -> FreeloResponse:
    return await client.get(
        f"/user/{segment(user_id)}/all-projects", params=params, tool=TOOL
    )


async def get_project(client: FreeloClient, project_id) -> FreeloResponse:
    return await client.get(f"/project/{segment(project_id)}", tool=TOOL)


async def delete_project(client: FreeloClient, project_id) -> FreeloResponse:
    return await client.delete(f"/project/{segment(project_id)}", tool=TOOL)


async def archive_project(client: FreeloClient, project_id) -> FreeloResponse:
    return await client.post(f"/project/{segment(project_id)}/archive", tool=TOOL)


async def activate_project(client: FreeloClient, project_id) -> FreeloResponse:
    return await client.post(f"/project/{segment(project_id)}/activate", tool=TOOL)


async def get_project_workers(
    client: FreeloClient, project_id, params: Params = None
) -> FreeloResponse:
    return await client.get(
        f"/project/{segment(project_id)}/workers", params=params, tool=TOOL
    )


async def remove_workers_by_ids(
    client: FreeloClient, project_id, body: Body
) -> FreeloResponse:
    return await client.post(
        f"/project/{segment(project_id)}/remove-workers/by-ids", json=body, tool=TOOL
    )


async def remove_workers_by_emails(
    client: FreeloClient, project_id, body: Body
) -> FreeloResponse:
    return await client.post(
        f"/project/{segment(project_id)}/remove-workers/by-emails",
        json=body,
        tool=TOOL,
    )


async def create_project_from_template(
    client: FreeloClient, template_id, body: Body
) -> FreeloResponse:
    return await client.post(
        f"/project/create-from-template/{segment(template_id)}", json=body, tool=TOOL
    )
