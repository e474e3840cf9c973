import datetime as dt

from pydantic import BaseModel, ConfigDict, Field


class DataPoint(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    date: dt.date = Field(alias="timestamp")  # YYYY-MM-DD on the wire
    value: float


class MetricOut(BaseModel):
    id: str
    baseline: float
    spread: float
