from __future__ import annotations

from flask import Flask, request

from ..common.responses import api_errors, json_error, json_success
from ..container import Container
from ..core.constants import DEFAULT_ANNIVERSARY_WINDOW_DAYS
from ..core.enums import Role


def register(app: Flask, container: Container) -> None:
    service = container.employee_service

    @app.route("/api/employees/anniversaries", methods=["GET"], endpoint="employees_anniversaries")
    @api_errors
    def anniversaries():
        days = request.args.get("days", DEFAULT_ANNIVERSARY_WINDOW_DAYS, type=int)
        role_s = request.args.get("role")
        if role_s and role_s not in {r.value for r in Role}:
            return json_error("Invalid role filter", 400)

        rows = service.get_upcoming_anniversaries(days, role=Role(role_s) if role_s else None)
        return json_success([a.to_dict() for a in rows])

    @app.route("/api/employees/tenure-stats", methods=["GET"], endpoint="employees_tenure_stats")
    @api_errors
    def tenure_stats():
        return json_success(service.get_tenure_statistics())

    @app.route("/api/employees/<employee_id>/tenure", methods=["GET"], endpoint="employees_tenure")
    @api_errors
    def tenure(employee_id: str):
        info = service.get_tenure(employee_id)
        return json_success(info.to_dict() if info else None)
