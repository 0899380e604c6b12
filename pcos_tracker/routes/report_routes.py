from flask import Blueprint
from pcos_tracker.controllers.report_controller import report_range_handler

report_bp = Blueprint("reports", __name__, url_prefix="/api/reports")

@report_bp.route("/user/<int:user_id>/range", methods=["GET"])
def report_range(user_id):
    return report_range_handler(user_id)
