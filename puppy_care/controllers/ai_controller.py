from flask import Blueprint, request

from puppy_care.controllers.dependencies import get_clock, get_repositories
from puppy_care.core.api_utils import api_error, get_json_body, respond
from puppy_care.core.result import DomainError, Failure
from puppy_care.schemas.dtos import AIRecommendationResponse
from puppy_care.services.ai_service import AIService

ai_bp = Blueprint("ai", __name__, url_prefix="/ai")


def _service() -> AIService:
    return AIService(get_repositories().ai, clock=get_clock())


def _serialize(recommendation):
    return AIRecommendationResponse.from_domain(recommendation).to_dict()


def _serialize_many(recommendations):
    return [_serialize(r) for r in recommendations]


@ai_bp.route("/recommendations", methods=["POST"])
def generate_recommendation():
    body = get_json_body()
    if isinstance(body, Failure):
        return api_error(body.error)
    data = body.value
    metadata = data.get("metadata") or {}
    if not isinstance(metadata, dict):
        return api_error(DomainError.validation("metadata must be an object"))
    result = _service().generate_recommendation(
        data.get("puppy_id"),
        data.get("category"),
        data.get("recommendation"),
        data.get("confidence"),
        metadata=metadata,
    )
    return respond(result, _serialize, status_code=201)


@ai_bp.route("/recommendations", methods=["GET"])
def get_recommendations_by_category():
    category = request.args.get("category")
    if not category:
        return api_error(DomainError.validation("category query parameter is required"))
    return respond(_service().get_recommendations_by_category(category), _serialize_many)


@ai_bp.route("/recommendations/<recommendation_id>", methods=["GET"])
def get_recommendation(recommendation_id):
    return respond(_service().get_recommendation(recommendation_id), _serialize)


@ai_bp.route("/recommendations/puppy/<puppy_id>", methods=["GET"])
def get_puppy_recommendations(puppy_id):
    return respond(_service().get_puppy_recommendations(puppy_id), _serialize_many)


@ai_bp.route("/recommendations/<recommendation_id>/confidence", methods=["PUT"])
def update_confidence(recommendation_id):
    body = get_json_body()
    if isinstance(body, Failure):
        return api_error(body.error)
    result = _service().update_confidence(recommendation_id, body.value.get("confidence"))
    return respond(result, _serialize)


@ai_bp.route("/recommendations/<recommendation_id>", methods=["DELETE"])
def delete_recommendation(recommendation_id):
    return respond(_service().delete_recommendation(recommendation_id))
