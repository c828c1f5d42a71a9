"""
Service catalog schemas
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from fieldops.models.employee import ServiceType
from fieldops.models.service import Popularity


class ServiceCreate(BaseModel):
    name: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    service_type: ServiceType
    image_url: Optional[str] = None
    technicians_count: int = Field(default=0, ge=0)
    popularity: Popularity = Popularity.REGULAR


class ServiceOut(BaseModel):
    id: int
    name: str
    description: str
    service_type: ServiceType
    image_url: Optional[str] = None
    technicians_count: int
    popularity: Popularity

    model_config = ConfigDict(from_attributes=True)
