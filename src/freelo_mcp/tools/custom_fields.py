from __future__ import annotations

from typing import Any

from freelo_mcp.core.adapters import custom_fields as api
from freelo_mcp.core.client import FreeloClient
from freelo_mcp.models import (
    CustomFieldInput,
    EnumOptionInput,
    EnumValueInput,
    FieldValueInput,
)


async def get_custom_field_types(client: FreeloClient) -> Any:
    """List available custom field types."""
    return (await api.get_types(client)).data


async def create_custom_field(
    client: FreeloClient, project_id: str, field_data: CustomFieldInput
) -> Any:
    """Create a custom field in a project."""
    return (
        await api.create_custom_field(client, project_id, field_data.payload())
    ).data


async def rename_custom_field(client: FreeloClient, uuid: str, name: str) -> Any:
    """Rename a custom field."""
    return (await api.rename_custom_field(client, uuid, {"name": name})).data


async def delete_custom_field(client: FreeloClient, uuid: str) -> Any:
    """Delete a custom field."""
    return (await api.delete_custom_field(client, uuid)).data


async def restore_custom_field(client: FreeloClient, uuid: str) -> Any:
    """Restore a deleted custom field."""
    return (await api.restore_custom_field(client, uuid)).data


async def add_or_edit_field_value(
    client: FreeloClient, value_data: FieldValueInput
) -> Any:
    """Set the value of a custom field on a task."""
    return (await api.add_or_edit_value(client, value_data.payload())).data


async def add_or_edit_enum_value(
    client: FreeloClient, value_data: EnumValueInput
) -> Any:
    """Select an enum option of a custom field on a task."""
    return (await api.add_or_edit_enum_value(client, value_data.payload())).data


async def delete_field_value(client: FreeloClient, uuid: str) -> Any:
    """Delete a custom field value."""
    return (await api.delete_value(client, uuid)).data


async def get_custom_fields_by_project(client: FreeloClient, project_id: str) -> Any:
    """List custom fields defined in a project."""
    return (await api.find_by_project(client, project_id)).data


async def get_enum_options(client: FreeloClient, custom_field_uuid: str) -> Any:
    """List options of an enum custom field."""
    return (await api.get_enum_options(client, custom_field_uuid)).data


async def create_enum_option(
    client: FreeloClient, custom_field_uuid: str, option_data: EnumOptionInput
) -> Any:
    """Add an option to an enum custom field."""
    return (
        await api.create_enum_option(client, custom_field_uuid, option_data.payload())
    ).data
