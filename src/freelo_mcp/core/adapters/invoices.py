from __future__ import annotations

import httpx

from ..client import FreeloClient, FreeloResponse
from . import Body, Params, read_all, segment

TOOL = "invoices"


def _reports_path(invoice_id) -> str:
    return f"/issued-invoice/{segment(invoice_id)}/reports"


async def get_issued_invoices(
    client: FreeloClient, params: Params = None
) -> FreeloResponse:
    return await client.get("/issued-invoices", params=params, tool=TOOL)


async def get_issued_invoice(client: FreeloClient, invoice_id) -> FreeloResponse:
    return await client.get(f"/issued-invoice/{segment(invoice_id)}", tool=TOOL)


async def open_invoice_reports(client: FreeloClient, invoice_id) -> httpx.Response:
    """Streamed CSV export of the invoice's work reports."""
    return await client.stream("GET", _reports_path(invoice_id), tool=TOOL)


async def get_invoice_reports(client: FreeloClient, invoice_id) -> FreeloResponse:
    """CSV export read into memory and decoded as text."""
    resp, content = await read_all(client, _reports_path(invoice_id), tool=TOOL)
    return FreeloResponse(
        status_code=resp.status_code,
        data=content.decode(resp.encoding or "utf-8", errors="replace"),
        headers=dict(resp.headers),
    )


async def mark_as_invoiced(
    client: FreeloClient, invoice_id, body: Body = None
) -> FreeloResponse:
    return await client.post(
        f"/issued-invoice/{segment(invoice_id)}/mark-as-invoiced", json=body, tool=TOOL
    )
