"""Response models for the district API."""

from typing import Optional

from pydantic import BaseModel, ConfigDict


class DistrictSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    district_code: str
    district_name: str


class MapDataEntry(DistrictSummary):
    persondays_of_central_liability_so_far: Optional[int] = None
    month: str
    fin_year: str


class DistrictRecord(MapDataEntry):
    id: int


class HealthStatus(BaseModel):
    status: str
    time: str
