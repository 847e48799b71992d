from fastapi import APIRouter, Depends, status
from ..dependencies import get_door_manager, get_set_status_request
from ..models import SetStatusRequest, SetStatusResponse, StatusResponse
from src.door_manager import DoorManager

router = APIRouter(tags=["doors"])


@router.get(
    "/status",
    status_code=status.HTTP_200_OK,
    response_model=StatusResponse,
    response_model_by_alias=True,
    response_model_exclude_none=True,
)
async def get_door_status(door_manager: DoorManager = Depends(get_door_manager)):
    return door_manager.get_status()


@router.post(
    "/set-status",
    status_code=status.HTTP_200_OK,
    response_model=SetStatusResponse,
    response_model_by_alias=True,
)
async def set_door_status(
    body: SetStatusRequest = Depends(get_set_status_request),
    door_manager: DoorManager = Depends(get_door_manager),
):
    return await door_manager.set_status(body.is_open)
