"""FastAPI routes for the Shipping domain."""

import json
from dataclasses import asdict

from fastapi import APIRouter
from protean.utils.globals import current_domain

from shipping.api.schemas import (
    AssignRouteRequest,
    BookCargoRequest,
    BookedCargoResponse,
    CargoStatusResponse,
    ChangeDestinationRequest,
    HandlingEventIdResponse,
    LocationResponse,
    RegisterHandlingEventRequest,
    RouteCandidateResponse,
    StatusResponse,
    TrackedCargoResponse,
    TrackingIdResponse,
)
from shipping.cargo.booking import BookNewCargo
from shipping.cargo.locking import process_serialized
from shipping.cargo.route_assignment import AssignCargoToRoute, ChangeDestination, request_possible_routes
from shipping.handling.registration import RegisterHandlingEvent
from shipping.projections.cargo_status import cargo_status_views
from shipping.reference.location import Location
from shipping.tracking.assembler import list_booked_cargos, load_booked_cargo, track_cargo

# ---------------------------------------------------------------------------
# Cargo Router
# ---------------------------------------------------------------------------
cargo_router = APIRouter(prefix="/cargos", tags=["cargos"])


@cargo_router.post("", status_code=201, response_model=TrackingIdResponse)
async def book_cargo(body: BookCargoRequest) -> TrackingIdResponse:
    """Book a new cargo; it starts out unrouted."""
    command = BookNewCargo(
        origin=body.origin,
        destination=body.destination,
        arrival_deadline=body.arrival_deadline,
    )
    result = current_domain.process(command, asynchronous=False)
    return TrackingIdResponse(tracking_id=result)


@cargo_router.get("", response_model=list[BookedCargoResponse])
async def list_cargos() -> list[BookedCargoResponse]:
    return [BookedCargoResponse(**asdict(cargo)) for cargo in list_booked_cargos()]


@cargo_router.get("/status", response_model=list[CargoStatusResponse])
async def list_cargo_statuses(misdirected: bool | None = None) -> list[CargoStatusResponse]:
    """Latest delivery status per cargo, optionally filtered by misdirection."""
    return [CargoStatusResponse(**view.to_dict()) for view in cargo_status_views(misdirected)]


@cargo_router.get("/{tracking_id}", response_model=BookedCargoResponse)
async def get_cargo(tracking_id: str) -> BookedCargoResponse:
    return BookedCargoResponse(**asdict(load_booked_cargo(tracking_id)))


@cargo_router.get("/{tracking_id}/routes", response_model=list[RouteCandidateResponse])
async def get_route_candidates(tracking_id: str) -> list[RouteCandidateResponse]:
    """Candidate itineraries for the cargo's current route specification."""
    return [RouteCandidateResponse(legs=itinerary.to_dicts()) for itinerary in request_possible_routes(tracking_id)]


@cargo_router.post("/{tracking_id}/route", response_model=StatusResponse)
async def assign_route(tracking_id: str, body: AssignRouteRequest) -> StatusResponse:
    command = AssignCargoToRoute(
        tracking_id=tracking_id,
        legs=json.dumps([leg.model_dump(mode="json") for leg in body.legs]),
    )
    process_serialized(command, tracking_id)
    return StatusResponse(status="route_assigned")


@cargo_router.put("/{tracking_id}/destination", response_model=StatusResponse)
async def change_destination(tracking_id: str, body: ChangeDestinationRequest) -> StatusResponse:
    command = ChangeDestination(tracking_id=tracking_id, destination=body.destination)
    process_serialized(command, tracking_id)
    return StatusResponse(status="destination_changed")


# ---------------------------------------------------------------------------
# Location Router
# ---------------------------------------------------------------------------
location_router = APIRouter(prefix="/locations", tags=["locations"])


@location_router.get("", response_model=list[LocationResponse])
async def list_locations() -> list[LocationResponse]:
    locations = current_domain.repository_for(Location).find_all()
    return [LocationResponse(unlocode=loc.unlocode, name=loc.name) for loc in locations]


# ---------------------------------------------------------------------------
# Handling Router
# ---------------------------------------------------------------------------
handling_router = APIRouter(prefix="/handling-events", tags=["handling"])


@handling_router.post("", status_code=201, response_model=HandlingEventIdResponse)
async def register_handling_event(body: RegisterHandlingEventRequest) -> HandlingEventIdResponse:
    """Record that a cargo was handled.

    The cargo's delivery is re-derived under its lock before the response is sent.
    """
    command = RegisterHandlingEvent(
        completed_at=body.completed_at,
        tracking_id=body.tracking_id,
        voyage_number=body.voyage_number,
        location=body.location,
        event_type=body.event_type,
    )
    result = process_serialized(command, body.tracking_id)
    return HandlingEventIdResponse(handling_event_id=result)


# ---------------------------------------------------------------------------
# Tracking Router
# ---------------------------------------------------------------------------
tracking_router = APIRouter(prefix="/tracking", tags=["tracking"])


@tracking_router.get("/{tracking_id}", response_model=TrackedCargoResponse)
async def get_tracking(tracking_id: str) -> TrackedCargoResponse:
    return TrackedCargoResponse(**asdict(track_cargo(tracking_id)))
