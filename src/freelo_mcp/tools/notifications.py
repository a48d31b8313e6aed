from __future__ import annotations

from typing import Any, Optional

from freelo_mcp.core.adapters import notifications as api
from freelo_mcp.core.client import FreeloClient
from freelo_mcp.models import NotificationFilters, dump


async def get_all_notifications(
    client: FreeloClient, filters: Optional[NotificationFilters] = None
) -> Any:
    """List notifications of the current user."""
    return (await api.get_all_notifications(client, dump(filters))).data


async def mark_notification_read(client: FreeloClient, notification_id: str) -> Any:
    """Mark a notification as read."""
    return (await api.mark_as_read(client, notification_id)).data


async def mark_notification_unread(client: FreeloClient, notification_id: str) -> Any:
    """Mark a notification as unread."""
    return (await api.mark_as_unread(client, notification_id)).data
