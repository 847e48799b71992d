import json
from fastapi import Request
from pydantic import ValidationError
from .exceptions import InvalidRequest
from .models import SetStatusRequest
from src.door_manager import DoorManager


def get_door_manager(request: Request) -> DoorManager:
    return request.app.state.door_manager


async def get_set_status_request(request: Request) -> SetStatusRequest:
    # Parsed by hand so every malformed body gets the same 400 reply
    content_type = request.headers.get("content-type", "")
    if content_type.split(";")[0].strip().lower() != "application/json":
        raise InvalidRequest()

    try:
        payload = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        raise InvalidRequest()

    if not isinstance(payload, dict):
        raise InvalidRequest()

    try:
        return SetStatusRequest.model_validate(payload)
    except ValidationError:
        raise InvalidRequest()
