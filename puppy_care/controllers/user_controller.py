from flask import Blueprint

from puppy_care.controllers.dependencies import get_clock, get_repositories
from puppy_care.core.api_utils import api_error, get_json_body, respond
from puppy_care.core.result import Failure
from puppy_care.schemas.dtos import RegisterUserCommand, UserResponse
from puppy_care.services.user_service import (
    ActivateUserUseCase,
    ChangeUserRoleUseCase,
    DeactivateUserUseCase,
    GetUserUseCase,
    RegisterUserUseCase,
)

user_bp = Blueprint("users", __name__, url_prefix="/users")


def _serialize(user):
    return UserResponse.from_domain(user).to_dict()


@user_bp.route("", methods=["POST"])
def register_user():
    body = get_json_body()
    if isinstance(body, Failure):
        return api_error(body.error)
    data = body.value
    command = RegisterUserCommand(email=data.get("email"), role=data.get("role") or "user")
    result = RegisterUserUseCase(get_repositories().users, clock=get_clock()).execute(command)
    return respond(result, _serialize, status_code=201)


@user_bp.route("/<user_id>", methods=["GET"])
def get_user(user_id):
    return respond(GetUserUseCase(get_repositories().users).execute(user_id), _serialize)


@user_bp.route("/<user_id>/role", methods=["PUT"])
def change_user_role(user_id):
    body = get_json_body()
    if isinstance(body, Failure):
        return api_error(body.error)
    result = ChangeUserRoleUseCase(get_repositories().users, clock=get_clock()).execute(
        user_id, body.value.get("role")
    )
    return respond(result, _serialize)


@user_bp.route("/<user_id>/deactivate", methods=["POST"])
def deactivate_user(user_id):
    result = DeactivateUserUseCase(get_repositories().users, clock=get_clock()).execute(user_id)
    return respond(result, _serialize)


@user_bp.route("/<user_id>/activate", methods=["POST"])
def activate_user(user_id):
    result = ActivateUserUseCase(get_repositories().users, clock=get_clock()).execute(user_id)
    return respond(result, _serialize)
