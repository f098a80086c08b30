from flask import Blueprint

from puppy_care.controllers.dependencies import get_clock, get_repositories
from puppy_care.core.api_utils import api_error, get_json_body, parse_datetime, respond
from puppy_care.core.result import Failure
from puppy_care.schemas.dtos import TrainingSessionResponse
from puppy_care.services.training_service import TrainingService

training_bp = Blueprint("training", __name__, url_prefix="/training")


def _service() -> TrainingService:
    return TrainingService(get_repositories().training, clock=get_clock())


def _serialize(session):
    return TrainingSessionResponse.from_domain(session).to_dict()


@training_bp.route("", methods=["POST"])
def create_training_session():
    body = get_json_body()
    if isinstance(body, Failure):
        return api_error(body.error)
    data = body.value
    completed_at = parse_datetime(data.get("completed_at"), "completed_at")
    if isinstance(completed_at, Failure):
        return api_error(completed_at.error)
    result = _service().create_training_session(
        data.get("puppy_id"),
        data.get("session_type"),
        data.get("duration"),
        data.get("notes", ""),
        completed_at=completed_at.value,
    )
    return respond(result, _serialize, status_code=201)


@training_bp.route("/<session_id>", methods=["GET"])
def get_training_session(session_id):
    return respond(_service().get_training_session(session_id), _serialize)


@training_bp.route("/puppy/<puppy_id>", methods=["GET"])
def get_puppy_training_sessions(puppy_id):
    result = _service().get_puppy_training_sessions(puppy_id)
    return respond(result, lambda sessions: [_serialize(s) for s in sessions])


@training_bp.route("/<session_id>/notes", methods=["PUT"])
def update_training_notes(session_id):
    body = get_json_body()
    if isinstance(body, Failure):
        return api_error(body.error)
    result = _service().update_training_notes(session_id, body.value.get("notes", ""))
    return respond(result, _serialize)


@training_bp.route("/<session_id>", methods=["DELETE"])
def delete_training_session(session_id):
    return respond(_service().delete_training_session(session_id))
