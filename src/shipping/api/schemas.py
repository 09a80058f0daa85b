"""Pydantic API schemas for the Shipping domain.

These are the external API contracts, separate from domain commands.
The API layer translates between these schemas and domain commands.
"""

from datetime import datetime

from pydantic import AwareDatetime, BaseModel


# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------
class LegSchema(BaseModel):
    voyage_number: str
    load_location: str
    unload_location: str
    load_time: datetime | None = None
    unload_time: datetime | None = None


class LegRequest(LegSchema):
    load_time: AwareDatetime | None = None
    unload_time: AwareDatetime | None = None


class BookCargoRequest(BaseModel):
    origin: str
    destination: str
    arrival_deadline: AwareDatetime


class AssignRouteRequest(BaseModel):
    legs: list[LegRequest]


class ChangeDestinationRequest(BaseModel):
    destination: str


class RegisterHandlingEventRequest(BaseModel):
    completed_at: AwareDatetime | None = None
    tracking_id: str
    voyage_number: str | None = None
    location: str
    event_type: str


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------
class TrackingIdResponse(BaseModel):
    tracking_id: str


class HandlingEventIdResponse(BaseModel):
    handling_event_id: str


class StatusResponse(BaseModel):
    status: str


class RouteCandidateResponse(BaseModel):
    legs: list[LegSchema]


class BookedCargoResponse(BaseModel):
    tracking_id: str
    origin: str
    destination: str
    arrival_deadline: datetime | None = None
    legs: list[LegSchema]
    misrouted: bool
    routed: bool


class LocationResponse(BaseModel):
    unlocode: str
    name: str


class TrackedEventResponse(BaseModel):
    description: str
    expected: bool


class TrackedCargoResponse(BaseModel):
    tracking_id: str
    status_text: str
    origin: str
    destination: str
    eta: datetime | None = None
    next_expected_activity: str
    arrival_deadline: datetime | None = None
    events: list[TrackedEventResponse]


class CargoStatusResponse(BaseModel):
    tracking_id: str
    origin: str
    destination: str
    arrival_deadline: datetime | None = None
    transport_status: str
    routing_status: str
    last_known_location: str | None = None
    current_voyage: str | None = None
    is_misdirected: bool
    is_unloaded_at_destination: bool
    eta: datetime | None = None
    next_expected_event_type: str | None = None
    next_expected_location: str | None = None
    next_expected_voyage: str | None = None
