from flask import Blueprint
from pcos_tracker.controllers.user_controller import (
    list_users_handler,
    get_user_handler,
    create_user_handler,
    update_user_handler
)

user_bp = Blueprint("users", __name__, url_prefix="/api/users")

@user_bp.route("", methods=["GET"])
def list_users():
    return list_users_handler()

@user_bp.route("/<int:id>", methods=["GET"])
def get_user(id):
    return get_user_handler(id)

@user_bp.route("", methods=["POST"])
def create_user():
    return create_user_handler()

@user_bp.route("/<int:id>", methods=["PUT"])
def update_user(id):
    return update_user_handler(id)
