from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from src.logger import logger

INVALID_STATUS_MESSAGE = 'Invalid status provided. Send { "isOpen": boolean }'


class APIException(Exception):
    def __init__(self, status_code: int, detail: str):
        self.status_code = status_code
        self.detail = detail


class InvalidRequest(APIException):
    """The `isOpen` field was missing or not a boolean."""

    def __init__(self, detail: str = INVALID_STATUS_MESSAGE):
        super().__init__(status.HTTP_400_BAD_REQUEST, detail)


def create_error_response(status_code: int, message: str):
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": message},
    )


def configure_exception_handlers(app):
    @app.exception_handler(APIException)
    async def api_exception_handler(request: Request, exc: APIException):
        logger.warning(
            f"Rejected {request.method} {request.url.path}: {exc.detail}"
        )
        return create_error_response(exc.status_code, exc.detail)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return create_error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return create_error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "An unexpected error occurred",
        )
