from flask import current_app
from pcos_tracker.schemas.user_schema import CreateUserSchema, UpdateUserSchema
from pcos_tracker.store import get_store
from pcos_tracker.utils.errors import ServiceError
from pcos_tracker.utils.http import ok, error, json_body, validate_schema, service_error


def list_users_handler():
    return ok([u.to_dict() for u in get_store().list_users()])


def get_user_handler(user_id):
    try:
        user = get_store().get_user(user_id)
    except ServiceError as e:
        return service_error(e)
    return ok(user.to_dict())


def create_user_handler():
    body = json_body()
    data, errors = validate_schema(CreateUserSchema, body)
    if errors:
        message = "Name and email are required" if not body.get("name") or not body.get("email") else "Invalid user data"
        return error("VALIDATION_ERROR", message, 400, details=errors)

    try:
        user = get_store().create_user(data)
    except ServiceError as e:
        current_app.logger.warning(f"User creation rejected: {e.message}")
        return service_error(e)

    current_app.logger.info(f"Created user {user.id} ({user.email})")
    return ok(user.to_dict(), 201)


def update_user_handler(user_id):
    data, errors = validate_schema(UpdateUserSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "Invalid user data", 400, details=errors)

    try:
        user = get_store().update_user(user_id, data)
    except ServiceError as e:
        current_app.logger.warning(f"Update of user {user_id} rejected: {e.message}")
        return service_error(e)

    return ok(user.to_dict())
