"""
Calendar controller: events, listings and health timeline generation.
"""

from flask import Blueprint, request

from puppy_care.controllers.dependencies import get_clock, get_repositories
from puppy_care.core.api_utils import (
    api_error,
    get_json_body,
    parse_datetime,
    parse_int,
    respond,
)
from puppy_care.core.result import DomainError, Failure, Success
from puppy_care.schemas.dtos import (
    CreateEventCommand,
    EventResponse,
    GenerateHealthTimelineCommand,
    RecurringPatternCommand,
    UpdateEventCommand,
)
from puppy_care.services.calendar_service import (
    CreateEventUseCase,
    DeleteEventUseCase,
    GenerateHealthTimelineUseCase,
    GetEventsByDateRangeUseCase,
    GetPuppyEventsUseCase,
    GetUpcomingEventsUseCase,
    UpdateEventUseCase,
)

calendar_bp = Blueprint("calendar", __name__, url_prefix="/calendar")


def _serialize(event):
    return EventResponse.from_domain(event, get_clock().now()).to_dict()


def _serialize_many(events):
    now = get_clock().now()
    return [EventResponse.from_domain(event, now).to_dict() for event in events]


def _recurring_pattern(data):
    """Build the optional RecurringPatternCommand from the request body."""
    raw = data.get("recurring_pattern")
    if raw is None:
        return Success(None)
    if not isinstance(raw, dict):
        return Failure(DomainError.validation("recurring_pattern must be an object"))
    end_date = parse_datetime(raw.get("end_date"), "recurring_pattern.end_date")
    if isinstance(end_date, Failure):
        return end_date
    return Success(
        RecurringPatternCommand(
            type=raw.get("type"), interval=raw.get("interval"), end_date=end_date.value
        )
    )


@calendar_bp.route("/events", methods=["POST"])
def create_event():
    body = get_json_body()
    if isinstance(body, Failure):
        return api_error(body.error)
    data = body.value
    event_date_time = parse_datetime(data.get("event_date_time"), "event_date_time")
    if isinstance(event_date_time, Failure):
        return api_error(event_date_time.error)
    pattern = _recurring_pattern(data)
    if isinstance(pattern, Failure):
        return api_error(pattern.error)

    command = CreateEventCommand(
        title=data.get("title"),
        description=data.get("description"),
        event_date_time=event_date_time.value,
        event_type=data.get("event_type"),
        puppy_id=data.get("puppy_id"),
        recurring_pattern=pattern.value,
    )
    result = CreateEventUseCase(get_repositories().events, clock=get_clock()).execute(command)
    return respond(result, _serialize, status_code=201)


@calendar_bp.route("/events", methods=["GET"])
def get_events_by_date_range():
    """List events between the ``start`` and ``end`` query parameters."""
    start = parse_datetime(request.args.get("start"), "start")
    if isinstance(start, Failure):
        return api_error(start.error)
    end = parse_datetime(request.args.get("end"), "end")
    if isinstance(end, Failure):
        return api_error(end.error)
    result = GetEventsByDateRangeUseCase(get_repositories().events).execute(
        start.value, end.value
    )
    return respond(result, _serialize_many)


@calendar_bp.route("/events/<event_id>", methods=["PUT"])
def update_event(event_id):
    body = get_json_body()
    if isinstance(body, Failure):
        return api_error(body.error)
    data = body.value
    event_date_time = parse_datetime(data.get("event_date_time"), "event_date_time")
    if isinstance(event_date_time, Failure):
        return api_error(event_date_time.error)

    command = UpdateEventCommand(
        event_id=event_id,
        title=data.get("title"),
        description=data.get("description"),
        event_date_time=event_date_time.value,
        event_type=data.get("event_type"),
    )
    result = UpdateEventUseCase(get_repositories().events, clock=get_clock()).execute(command)
    return respond(result, _serialize)


@calendar_bp.route("/events/<event_id>", methods=["DELETE"])
def delete_event(event_id):
    result = DeleteEventUseCase(get_repositories().events).execute(event_id)
    return respond(result)


@calendar_bp.route("/health-timeline", methods=["POST"])
def generate_health_timeline():
    """Create the vaccination events still due for {puppy_id, breed, birth_date}."""
    body = get_json_body()
    if isinstance(body, Failure):
        return api_error(body.error)
    data = body.value
    birth_date = parse_datetime(data.get("birth_date"), "birth_date")
    if isinstance(birth_date, Failure):
        return api_error(birth_date.error)

    command = GenerateHealthTimelineCommand(
        puppy_id=data.get("puppy_id"),
        breed=data.get("breed"),
        birth_date=birth_date.value,
    )
    result = GenerateHealthTimelineUseCase(
        get_repositories().events, clock=get_clock()
    ).execute(command)
    return respond(result, _serialize_many, status_code=201)


@calendar_bp.route("/puppy/<puppy_id>/events", methods=["GET"])
def get_puppy_events(puppy_id):
    result = GetPuppyEventsUseCase(get_repositories().events).execute(puppy_id)
    return respond(result, _serialize_many)


@calendar_bp.route("/puppy/<puppy_id>/upcoming", methods=["GET"])
def get_upcoming_events(puppy_id):
    limit = parse_int(request.args.get("limit"), "limit", default=10)
    if isinstance(limit, Failure):
        return api_error(limit.error)
    result = GetUpcomingEventsUseCase(get_repositories().events).execute(puppy_id, limit.value)
    return respond(result, _serialize_many)
