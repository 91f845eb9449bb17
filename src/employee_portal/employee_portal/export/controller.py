from __future__ import annotations

from datetime import date

from flask import Flask, request

from ..common.responses import api_errors, json_error, json_success
from ..container import Container
from ..core.enums import ExportFormat
from ..core.exceptions import NotFoundError
from .formatters import (
    format_all_employees_data_as_csv,
    format_all_employees_timecard_csv,
    format_employee_data_as_csv,
    format_employee_report_for_print,
    format_employee_timecard_csv,
    timecards_to_excel,
)

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def register(app: Flask, container: Container) -> None:
    exports = container.export_service
    payroll = container.payroll_report_service

    def _format() -> ExportFormat | None:
        try:
            return ExportFormat(request.args.get("format", ExportFormat.JSON.value).lower())
        except ValueError:
            return None

    def _attachment(body: bytes, *, filename: str, mimetype: str):
        return app.response_class(
            body,
            mimetype=mimetype,
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    def _csv(text: str, filename: str):
        return _attachment(text.encode("utf-8-sig"), filename=filename, mimetype="text/csv")

    @app.route("/api/export/all", methods=["GET"], endpoint="export_all")
    @api_errors
    def export_all():
        fmt = _format()
        if fmt not in {ExportFormat.JSON, ExportFormat.CSV, ExportFormat.TIMECARD, ExportFormat.XLSX}:
            return json_error("Unsupported export format", 400)

        data = exports.export_all_employees_data()
        stamp = date.today().strftime("%Y%m%d")
        if fmt == ExportFormat.CSV:
            return _csv(format_all_employees_data_as_csv(data), f"all_employees_{stamp}.csv")
        if fmt == ExportFormat.TIMECARD:
            return _csv(format_all_employees_timecard_csv(data, payroll), f"timecards_{stamp}.csv")
        if fmt == ExportFormat.XLSX:
            return _attachment(timecards_to_excel(data, payroll), filename=f"timecards_{stamp}.xlsx", mimetype=XLSX_MIMETYPE)
        return json_success([d.to_dict() for d in data])

    @app.route("/api/export/<employee_id>", methods=["GET"], endpoint="export_employee")
    @api_errors
    def export_employee(employee_id: str):
        fmt = _format()
        if fmt is None:
            return json_error("Unsupported export format", 400)

        data = exports.export_employee_data(employee_id)
        if not data:
            raise NotFoundError("Export data not found")

        stamp = date.today().strftime("%Y%m%d")
        if fmt == ExportFormat.PRINT:
            return app.response_class(format_employee_report_for_print(data), mimetype="text/plain")
        if fmt == ExportFormat.CSV:
            return _csv(format_employee_data_as_csv(data), f"employee_{employee_id}_{stamp}.csv")
        if fmt == ExportFormat.TIMECARD:
            return _csv(format_employee_timecard_csv(data, payroll), f"timecard_{employee_id}_{stamp}.csv")
        if fmt == ExportFormat.XLSX:
            return _attachment(
                timecards_to_excel([data], payroll),
                filename=f"timecard_{employee_id}_{stamp}.xlsx",
                mimetype=XLSX_MIMETYPE,
            )
        return json_success(data.to_dict())
