"""
Puppy controller: HTTP translation for the puppy use-cases.
"""

from flask import Blueprint

from puppy_care.controllers.dependencies import get_clock, get_repositories
from puppy_care.core.api_utils import (
    api_error,
    get_json_body,
    parse_datetime,
    respond,
)
from puppy_care.core.result import Failure
from puppy_care.schemas.dtos import (
    CreatePuppyCommand,
    PuppyResponse,
    UpdatePuppyWeightCommand,
)
from puppy_care.services.puppy_service import (
    CreatePuppyUseCase,
    DeletePuppyUseCase,
    GetPuppiesByOwnerUseCase,
    GetPuppyByIdUseCase,
    UpdatePuppyWeightUseCase,
)

puppy_bp = Blueprint("puppies", __name__, url_prefix="/puppies")


def _serialize(puppy):
    return PuppyResponse.from_domain(puppy, get_clock().now()).to_dict()


@puppy_bp.route("", methods=["POST"])
def create_puppy():
    """Create a puppy from {name, breed, birth_date, current_weight, weight_unit?, owner_id}."""
    body = get_json_body()
    if isinstance(body, Failure):
        return api_error(body.error)
    data = body.value
    birth_date = parse_datetime(data.get("birth_date"), "birth_date")
    if isinstance(birth_date, Failure):
        return api_error(birth_date.error)

    command = CreatePuppyCommand(
        name=data.get("name"),
        breed=data.get("breed"),
        birth_date=birth_date.value,
        current_weight=data.get("current_weight"),
        owner_id=data.get("owner_id"),
        weight_unit=data.get("weight_unit", "kg"),
    )
    result = CreatePuppyUseCase(get_repositories().puppies, clock=get_clock()).execute(command)
    return respond(result, _serialize, status_code=201)


@puppy_bp.route("/<puppy_id>", methods=["GET"])
def get_puppy(puppy_id):
    result = GetPuppyByIdUseCase(get_repositories().puppies).execute(puppy_id)
    return respond(result, _serialize)


@puppy_bp.route("/owner/<owner_id>", methods=["GET"])
def get_puppies_by_owner(owner_id):
    result = GetPuppiesByOwnerUseCase(get_repositories().puppies).execute(owner_id)
    return respond(result, lambda puppies: [_serialize(p) for p in puppies])


@puppy_bp.route("/<puppy_id>/weight", methods=["PUT"])
def update_puppy_weight(puppy_id):
    body = get_json_body()
    if isinstance(body, Failure):
        return api_error(body.error)
    data = body.value
    command = UpdatePuppyWeightCommand(
        puppy_id=puppy_id,
        new_weight=data.get("new_weight"),
        weight_unit=data.get("weight_unit", "kg"),
    )
    result = UpdatePuppyWeightUseCase(get_repositories().puppies, clock=get_clock()).execute(
        command
    )
    return respond(result, _serialize)


@puppy_bp.route("/<puppy_id>", methods=["DELETE"])
def delete_puppy(puppy_id):
    result = DeletePuppyUseCase(get_repositories().puppies).execute(puppy_id)
    return respond(result)
