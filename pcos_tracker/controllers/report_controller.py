from datetime import datetime, timezone
from pcos_tracker.schemas.report_schema import ReportRangeQuerySchema
from pcos_tracker.services.report_service import generate_report
from pcos_tracker.store import get_store
from pcos_tracker.utils.errors import ServiceError
from pcos_tracker.utils.http import ok, error, arg_str, validate_schema, service_error


def report_range_handler(user_id):
    query = {k: arg_str(k) for k in ("startDate", "endDate") if arg_str(k) is not None}
    params, errors = validate_schema(ReportRangeQuerySchema, query)
    if errors:
        return error("VALIDATION_ERROR", "startDate and endDate must be ISO dates", 400, details=errors)

    try:
        report = generate_report(get_store(), user_id, params["start_date"], params["end_date"])
    except ServiceError as e:
        return service_error(e)

    return ok(report.to_dict(generated_at=datetime.now(timezone.utc)))
