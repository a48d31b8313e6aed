from starlette.requests import Request
from starlette.routing import Route

from freelo_mcp.core.adapters import invoices as api

from ..http import call, query, read_json, stream_download


async def get_issued_invoices(request: Request):
    return await call(request, api.get_issued_invoices, query(request))


async def get_issued_invoice(request: Request):
    return await call(request, api.get_issued_invoice, request.path_params["invoice_id"])


async def download_invoice_reports(request: Request):
    invoice_id = request.path_params["invoice_id"]
    return await stream_download(
        request,
        api.open_invoice_reports,
        invoice_id,
        not_found=("Invoice not found", "Could not download invoice reports"),
        headers={
            "Content-Type": "text/csv",
            "Content-Disposition": f'attachment; filename="invoice-{invoice_id}-reports.csv"',
        },
    )


async def mark_as_invoiced(request: Request):
    return await call(
        request,
        api.mark_as_invoiced,
        request.path_params["invoice_id"],
        await read_json(request),
    )


routes = [
    Route("/issued-invoices", get_issued_invoices, methods=["GET"]),
    Route("/issued-invoice/{invoice_id}", get_issued_invoice, methods=["GET"]),
    Route(
        "/issued-invoice/{invoice_id}/reports",
        download_invoice_reports,
        methods=["GET"],
    ),
    Route(
        "/issued-invoice/{invoice_id}/mark-as-invoiced",
        mark_as_invoiced,
        methods=["POST"],
    ),
]
