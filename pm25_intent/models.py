from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# A PM2.5 sample arrives either as a JSON number or as a JSON string holding
# a number. The wire type is kept; only the normalizer coerces strings.
PMSample = Union[float, str]


class Coordinate(BaseModel):
    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float


def decode_sample(value) -> PMSample:
    """Decode one wire sample: numeric first, then string."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            return float(value)
        except OverflowError:
            raise ValueError("value is not a valid type") from None
    if isinstance(value, str):
        return value
    raise ValueError("value is not a valid type")


class PMReading(BaseModel):
    """The ``data`` object of the PM2.5 API. Fields other than pm25 are ignored."""

    pm25: list[PMSample]

    @field_validator("pm25", mode="before")
    @classmethod
    def _decode_samples(cls, value):
        if not isinstance(value, list):
            raise ValueError("pm25 must be a list")
        return [decode_sample(item) for item in value]


class PM25Envelope(BaseModel):
    data: PMReading


# ── Invocation surface ────────────────────────────────────────────────────────

class IntentDescriptor(BaseModel):
    id: str
    title: str
    locale: Literal["th", "en"]


class PerformRequest(BaseModel):
    latitude: float | None = Field(default=None, ge=-90, le=90)
    longitude: float | None = Field(default=None, ge=-180, le=180)

    @model_validator(mode="after")
    def _both_or_neither(self):
        if (self.latitude is None) != (self.longitude is None):
            raise ValueError("latitude and longitude must be given together")
        return self

    def coordinate(self) -> Coordinate | None:
        if self.latitude is None or self.longitude is None:
            return None
        return Coordinate(latitude=self.latitude, longitude=self.longitude)


class IntentResponse(BaseModel):
    intent: str
    dialog: str


class HealthResponse(BaseModel):
    status: str
    api_url: str
    profile: str
