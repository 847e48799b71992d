from pydantic import BaseModel, ConfigDict, Field, StrictBool
from typing import Optional


class SetStatusRequest(BaseModel):
    is_open: StrictBool = Field(alias="isOpen")


class StatusResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    is_open: bool = Field(alias="isOpen")
    remaining_time: Optional[int] = Field(default=None, alias="remainingTime", ge=0)


class SetStatusResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool
    is_open: bool = Field(alias="isOpen")


class HealthResponse(BaseModel):
    status: str
