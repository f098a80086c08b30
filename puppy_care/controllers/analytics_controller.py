from flask import Blueprint, request

from puppy_care.controllers.dependencies import get_clock, get_repositories
from puppy_care.core.api_utils import api_error, get_json_body, parse_datetime, respond
from puppy_care.core.result import DomainError, Failure
from puppy_care.schemas.dtos import AnalyticsEventResponse
from puppy_care.services.analytics_service import AnalyticsService

analytics_bp = Blueprint("analytics", __name__, url_prefix="/analytics")


def _service() -> AnalyticsService:
    return AnalyticsService(get_repositories().analytics, clock=get_clock())


def _serialize(event):
    return AnalyticsEventResponse.from_domain(event).to_dict()


def _serialize_many(events):
    return [_serialize(e) for e in events]


@analytics_bp.route("/events", methods=["POST"])
def track_event():
    body = get_json_body()
    if isinstance(body, Failure):
        return api_error(body.error)
    data = body.value
    properties = data.get("properties") or {}
    if not isinstance(properties, dict):
        return api_error(DomainError.validation("Properties must be an object"))
    result = _service().track_event(
        data.get("user_id"),
        data.get("event_type"),
        data.get("event_name"),
        properties=properties,
    )
    return respond(result, _serialize, status_code=201)


@analytics_bp.route("/events", methods=["GET"])
def get_events_by_type():
    event_type = request.args.get("type")
    if not event_type:
        return api_error(DomainError.validation("type query parameter is required"))
    return respond(_service().get_events_by_type(event_type), _serialize_many)


@analytics_bp.route("/events/date-range", methods=["GET"])
def get_events_by_date_range():
    start = parse_datetime(request.args.get("start"), "start")
    if isinstance(start, Failure):
        return api_error(start.error)
    end = parse_datetime(request.args.get("end"), "end")
    if isinstance(end, Failure):
        return api_error(end.error)
    return respond(_service().get_events_by_date_range(start.value, end.value), _serialize_many)


@analytics_bp.route("/events/<event_id>", methods=["GET"])
def get_event(event_id):
    return respond(_service().get_event(event_id), _serialize)


@analytics_bp.route("/events/user/<user_id>", methods=["GET"])
def get_user_events(user_id):
    return respond(_service().get_user_events(user_id), _serialize_many)


@analytics_bp.route("/events/<event_id>/enrich", methods=["PUT"])
def enrich_event(event_id):
    body = get_json_body()
    if isinstance(body, Failure):
        return api_error(body.error)
    additional = body.value.get("properties")
    return respond(_service().enrich_event(event_id, additional), _serialize)


@analytics_bp.route("/events/<event_id>", methods=["DELETE"])
def delete_event(event_id):
    return respond(_service().delete_event(event_id))
