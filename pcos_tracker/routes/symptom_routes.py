from flask import Blueprint
from pcos_tracker.controllers.symptom_controller import (
    list_symptom_entries_handler,
    list_user_symptom_entries_handler,
    create_symptom_entry_handler,
    symptom_types_handler
)

symptom_bp = Blueprint("symptoms", __name__, url_prefix="/api/symptoms")

@symptom_bp.route("", methods=["GET"])
def list_symptom_entries():
    return list_symptom_entries_handler()

@symptom_bp.route("/user/<int:user_id>", methods=["GET"])
def list_user_symptom_entries(user_id):
    return list_user_symptom_entries_handler(user_id)

@symptom_bp.route("", methods=["POST"])
def create_symptom_entry():
    return create_symptom_entry_handler()

@symptom_bp.route("/types", methods=["GET"])
def symptom_types():
    return symptom_types_handler()
