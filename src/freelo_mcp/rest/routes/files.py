from starlette.datastructures import UploadFile
from starlette.requests import Request
from starlette.routing import Route

from freelo_mcp.core.adapters import files as api
from freelo_mcp.core.errors import InvalidInputError

from ..http import call, client_for, query, relay, stream_download


async def download_file(request: Request):
    return await stream_download(
        request,
        api.open_file_download,
        request.path_params["file_uuid"],
        not_found=("File not found", "Could not download file"),
    )


async def upload_file(request: Request):
    """Relay multipart field ``file`` to upstream; 400 before any upstream call if absent."""
    async with client_for(request) as client:
        form = await request.form()
        upload = form.get("file")
        if not isinstance(upload, UploadFile):
            raise InvalidInputError("No file provided", error="Bad Request")
        resp = await api.upload_file(
            client,
            upload.file,
            upload.filename or "upload",
            upload.content_type,
        )
    return relay(resp)


async def get_all_docs_and_files(request: Request):
    return await call(request, api.get_all_docs_and_files, query(request))


routes = [
    Route("/file/upload", upload_file, methods=["POST"]),
    Route("/file/{file_uuid}", download_file, methods=["GET"]),
    Route("/all-docs-and-files", get_all_docs_and_files, methods=["GET"]),
]
