from __future__ import annotations

from ..client import FreeloClient, FreeloResponse
from . import Body, segment

TOOL = "custom_fields"


async def get_types(client: FreeloClient) -> FreeloResponse:
    return await client.get("/custom-field/get-types", tool=TOOL)


async def create_custom_field(
    client: FreeloClient, project_id, body: Body
) -> FreeloResponse:
    return await client.post(
        f"/custom-field/create/{segment(project_id)}", json=body, tool=TOOL
    )


async def rename_custom_field(client: FreeloClient, uuid, body: Body) -> FreeloResponse:
    return await client.post(
        f"/custom-field/rename/{segment(uuid)}", json=body, tool=TOOL
    )


async def delete_custom_field(client: FreeloClient, uuid) -> FreeloResponse:
    return await client.delete(f"/custom-field/delete/{segment(uuid)}", tool=TOOL)


async def restore_custom_field(client: FreeloClient, uuid) -> FreeloResponse:
    return await client.post(f"/custom-field/restore/{segment(uuid)}", tool=TOOL)


async def add_or_edit_value(client: FreeloClient, body: Body) -> FreeloResponse:
    return await client.post("/custom-field/add-or-edit-value", json=body, tool=TOOL)


async def add_or_edit_enum_value(client: FreeloClient, body: Body) -> FreeloResponse:
    return await client.post(
        "/custom-field/add-or-edit-enum-value", json=body, tool=TOOL
    )


async def delete_value(client: FreeloClient, uuid) -> FreeloResponse:
    return await client.delete(f"/custom-field/delete-value/{segment(uuid)}", tool=TOOL)


async def find_by_project(client: FreeloClient, project_id) -> FreeloResponse:
    return await client.get(
        f"/custom-field/find-by-project/{segment(project_id)}", tool=TOOL
    )


async def get_enum_options(client: FreeloClient, custom_field_uuid) -> FreeloResponse:
    return await client.get(
        f"/custom-field-enum/get-for-custom-field/{segment(custom_field_uuid)}",
        tool=TOOL,
    )


async def create_enum_option(
    client: FreeloClient, custom_field_uuid, body: Body
) -> FreeloResponse:
    return await client.post(
        f"/custom-field-enum/create/{segment(custom_field_uuid)}", json=body, tool=TOOL
    )
