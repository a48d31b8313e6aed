from starlette.requests import Request
from starlette.routing import Route

from freelo_mcp.core.adapters import custom_fields as api

from ..http import call, read_json


async def get_types(request: Request):
    return await call(request, api.get_types)


async def create_custom_field(request: Request):
    return await call(
        request,
        api.create_custom_field,
        request.path_params["project_id"],
        await read_json(request),
    )


async def rename_custom_field(request: Request):
    return await call(
        request,
        api.rename_custom_field,
        request.path_params["uuid"],
        await read_json(request),
    )


async def delete_custom_field(request: Request):
    return await call(request, api.delete_custom_field, request.path_params["uuid"])


async def restore_custom_field(request: Request):
    return await call(request, api.restore_custom_field, request.path_params["uuid"])


async def add_or_edit_value(request: Request):
    return await call(request, api.add_or_edit_value, await read_json(request))


async def add_or_edit_enum_value(request: Request):
    return await call(request, api.add_or_edit_enum_value, await read_json(request))


async def delete_value(request: Request):
    return await call(request, api.delete_value, request.path_params["uuid"])


async def find_by_project(request: Request):
    return await call(request, api.find_by_project, request.path_params["project_id"])


async def get_enum_options(request: Request):
    return await call(
        request, api.get_enum_options, request.path_params["custom_field_uuid"]
    )


async def create_enum_option(request: Request):
    return await call(
        request,
        api.create_enum_option,
        request.path_params["custom_field_uuid"],
        await read_json(request),
    )


routes = [
    Route("/custom-field/get-types", get_types, methods=["GET"]),
    Route("/custom-field/create/{project_id}", create_custom_field, methods=["POST"]),
    Route("/custom-field/rename/{uuid}", rename_custom_field, methods=["POST"]),
    Route("/custom-field/delete/{uuid}", delete_custom_field, methods=["DELETE"]),
    Route("/custom-field/restore/{uuid}", restore_custom_field, methods=["POST"]),
    Route("/custom-field/add-or-edit-value", add_or_edit_value, methods=["POST"]),
    Route(
        "/custom-field/add-or-edit-enum-value",
        add_or_edit_enum_value,
        methods=["POST"],
    ),
    Route("/custom-field/delete-value/{uuid}", delete_value, methods=["DELETE"]),
    Route(
        "/custom-field/find-by-project/{project_id}", find_by_project, methods=["GET"]
    ),
    Route(
        "/custom-field-enum/get-for-custom-field/{custom_field_uuid}",
        get_enum_options,
        methods=["GET"],
    ),
    Route(
        "/custom-field-enum/create/{custom_field_uuid}",
        create_enum_option,
        methods=["POST"],
    ),
]
