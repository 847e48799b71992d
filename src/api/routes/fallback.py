import os
from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import FileResponse
from src.logger import logger

router = APIRouter(tags=["static"])


def resolve_public_file(public_dir: str, full_path: str) -> str:
    """
    Map a request path onto the public directory.

    Returns the matching file when one exists inside public_dir, otherwise
    public_dir/index.html so client-side routes still load the app.
    """
    root = os.path.realpath(public_dir)
    candidate = os.path.realpath(os.path.join(root, full_path))
    if (
        full_path
        and os.path.commonpath([root, candidate]) == root
        and os.path.isfile(candidate)
    ):
        return candidate
    return os.path.join(root, "index.html")


# Registered last: any GET not matched by another router lands here
@router.get("/{full_path:path}", include_in_schema=False)
async def serve_public(full_path: str, request: Request):
    path = resolve_public_file(request.app.state.public_dir, full_path)
    if not os.path.isfile(path):
        logger.error(f"Fallback document not found at {path}")
        raise HTTPException(status_code=404, detail="Not found")
    return FileResponse(path)


@router.api_route(
    "/{full_path:path}",
    methods=["POST", "PUT", "PATCH", "DELETE"],
    include_in_schema=False,
)
async def unknown_route(full_path: str):
    raise HTTPException(status_code=404, detail="Not found")
