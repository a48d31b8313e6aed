"""REST route tables, one module per Freelo resource family."""

from typing import List

from starlette.routing import BaseRoute

from . import (
    comments,
    custom_fields,
    custom_filters,
    events,
    files,
    invoices,
    labels,
    notes,
    notifications,
    pinned_items,
    projects,
    search,
    states,
    subtasks,
    tasklists,
    tasks,
    time_tracking,
    users,
    work_reports,
)

FAMILIES = (
    projects,
    pinned_items,
    tasklists,
    tasks,
    subtasks,
    comments,
    labels,
    events,
    notifications,
    files,
    search,
    users,
    time_tracking,
    work_reports,
    invoices,
    custom_fields,
    custom_filters,
    notes,
    states,
)


def all_routes() -> List[BaseRoute]:
    routes: List[BaseRoute] = []
    for family in FAMILIES:
        routes.extend(family.routes)
    return routes


__all__ = ["FAMILIES", "all_routes"]
