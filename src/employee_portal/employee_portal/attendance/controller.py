from __future__ import annotations

from flask import Flask, request

from ..common.responses import api_errors, json_success
from ..container import Container
from ..core.constants import DEFAULT_HISTORY_LIMIT, DEFAULT_STATS_DAYS


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service
    stats_days = int(app.config.get("DEFAULT_STATS_DAYS", DEFAULT_STATS_DAYS))

    def _date_override():
        body = request.get_json(silent=True) or {}
        return body.get("date") or request.args.get("date")

    @app.route("/api/attendance/<employee_id>/clock-in", methods=["POST"], endpoint="attendance_clock_in")
    @api_errors
    def clock_in(employee_id: str):
        record = service.clock_in(employee_id, date_override=_date_override())
        return json_success(record.to_dict())

    @app.route("/api/attendance/<employee_id>/clock-out", methods=["POST"], endpoint="attendance_clock_out")
    @api_errors
    def clock_out(employee_id: str):
        record = service.clock_out(employee_id, date_override=_date_override())
        return json_success(record.to_dict())

    @app.route("/api/attendance/<employee_id>/break/start", methods=["POST"], endpoint="attendance_break_start")
    @api_errors
    def break_start(employee_id: str):
        record = service.start_break(employee_id, date_override=_date_override())
        return json_success(record.to_dict())

    @app.route("/api/attendance/<employee_id>/break/end", methods=["POST"], endpoint="attendance_break_end")
    @api_errors
    def break_end(employee_id: str):
        record = service.end_break(employee_id, date_override=_date_override())
        return json_success(record.to_dict())

    @app.route("/api/attendance/<employee_id>/today", methods=["GET"], endpoint="attendance_today")
    @api_errors
    def today(employee_id: str):
        record = service.get_today(employee_id, date_override=_date_override())
        return json_success(record.to_dict() if record else None)

    @app.route("/api/attendance/<employee_id>/history", methods=["GET"], endpoint="attendance_history")
    @api_errors
    def history(employee_id: str):
        limit = request.args.get("limit", DEFAULT_HISTORY_LIMIT, type=int)
        return json_success([r.to_dict() for r in service.get_history(employee_id, limit=limit)])

    @app.route("/api/attendance/<employee_id>/stats", methods=["GET"], endpoint="attendance_stats")
    @api_errors
    def stats(employee_id: str):
        days = request.args.get("days", stats_days, type=int)
        return json_success(service.get_employee_stats(employee_id, days=days))
