from __future__ import annotations

from typing import Any, Optional

from freelo_mcp.core.adapters import comments as api
from freelo_mcp.core.client import FreeloClient
from freelo_mcp.models import (
    CommentCreateInput,
    CommentEditInput,
    CommentFilters,
    dump,
)


async def create_comment(
    client: FreeloClient, task_id: str, comment_data: CommentCreateInput
) -> Any:
    """Add a comment to a task."""
    return (await api.create_comment(client, task_id, comment_data.payload())).data


async def edit_comment(
    client: FreeloClient, comment_id: str, comment_data: CommentEditInput
) -> Any:
    """Edit the content (and attached files) of a comment."""
    return (
        await api.update_comment(client, comment_id, comment_data.payload())
    ).data


async def get_all_comments(
    client: FreeloClient, filters: Optional[CommentFilters] = None
) -> Any:
    """List comments across projects, filterable by type and project."""
    return (await api.get_all_comments(client, dump(filters))).data
