#file: backend/models.py

from datetime import datetime
from enum import IntEnum
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import List, Optional, Union

SERIES_FIELDS = [
    "time",
    "pm10",
    "pm2_5",
    "carbon_monoxide",
    "nitrogen_dioxide",
    "sulphur_dioxide",
    "ozone",
    "european_aqi"
]


class TimeWindow(IntEnum):
    DAY = 24
    TWO_DAYS = 48
    THREE_DAYS = 72

    @property
    def label(self) -> str:
        return f"{self.value}h"


class City(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Display name of the city")
    lat: float = Field(..., ge=-90, le=90, description="Latitude in degrees")
    lon: float = Field(..., ge=-180, le=180, description="Longitude in degrees")


class HourlyAirQuality(BaseModel):
    """Hourly telemetry as parallel series; index i of every series is the same hour."""

    time: List[str] = Field(..., description="Hour timestamps in ISO format, ascending")
    pm10: List[Optional[float]] = Field(..., description="PM10 concentration (µg/m³)")
    pm2_5: List[Optional[float]] = Field(..., description="PM2.5 concentration (µg/m³)")
    carbon_monoxide: List[Optional[float]] = Field(..., description="CO concentration (µg/m³)")
    nitrogen_dioxide: List[Optional[float]] = Field(..., description="NO2 concentration (µg/m³)")
    sulphur_dioxide: List[Optional[float]] = Field(..., description="SO2 concentration (µg/m³)")
    ozone: List[Optional[float]] = Field(..., description="O3 concentration (µg/m³)")
    european_aqi: List[Optional[int]] = Field(..., description="European AQI")

    @field_validator("time")
    @classmethod
    def check_timestamps(cls, value):
        for timestamp in value:
            try:
                datetime.fromisoformat(timestamp.replace("Z", "+00:00"))
            except ValueError:
                raise ValueError(f"Invalid ISO timestamp: {timestamp!r}")
        return value

    @model_validator(mode="after")
    def check_alignment(self):
        lengths = {field: len(getattr(self, field)) for field in SERIES_FIELDS}
        if len(set(lengths.values())) > 1:
            raise ValueError(f"Series lengths disagree: {lengths}")
        return self

    @property
    def hours(self) -> int:
        return len(self.time)


class AirQualityPayload(BaseModel):
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    timezone: Optional[str] = None
    hourly: HourlyAirQuality


class Averages(BaseModel):
    pm2_5: float
    pm10: float
    co: float
    no2: float
    so2: float
    o3: float


class StatHighlight(BaseModel):
    label: str
    value: Union[int, str, None] = Field(None, description="Current value, already formatted for display")
    unit: Optional[str] = None
    trend: Optional[float] = Field(None, description="Percent change of the current value vs. the window mean")


class Dataset(BaseModel):
    label: str
    data: List[Union[int, float, None]]


class ChartData(BaseModel):
    labels: List[str]
    datasets: List[Dataset]


class TableRow(BaseModel):
    time: str
    pm2_5: str
    pm10: str
    co: str
    no2: str
    so2: str
    o3: str
    aqi: Optional[int] = None


class DashboardView(BaseModel):
    city: City
    window: int
    hours: int = Field(..., description="Number of hours actually available in the window")
    stats: List[StatHighlight]
    timeline: ChartData
    distribution: ChartData
    comparison: ChartData
    particulates: ChartData
    gases: ChartData
    table: List[TableRow]


class LoginRequest(BaseModel):
    username: str
    password: str


class LoginResponse(BaseModel):
    username: str
