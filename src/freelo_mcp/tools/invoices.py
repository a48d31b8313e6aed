from __future__ import annotations

from typing import Any, Optional

from freelo_mcp.core.adapters import invoices as api
from freelo_mcp.core.client import FreeloClient
from freelo_mcp.models import InvoiceFilters, dump


async def get_issued_invoices(
    client: FreeloClient, filters: Optional[InvoiceFilters] = None
) -> Any:
    """List issued invoices, optionally by project and date range."""
    return (await api.get_issued_invoices(client, dump(filters))).data


async def get_invoice_detail(client: FreeloClient, invoice_id: str) -> Any:
    """Get details of an issued invoice."""
    return (await api.get_issued_invoice(client, invoice_id)).data


async def download_invoice_reports(client: FreeloClient, invoice_id: str) -> Any:
    """Download the work reports of an invoice as CSV text."""
    return (await api.get_invoice_reports(client, invoice_id)).data


async def mark_as_invoiced(client: FreeloClient, invoice_id: str) -> Any:
    """Mark an issued invoice as invoiced."""
    return (await api.mark_as_invoiced(client, invoice_id)).data
