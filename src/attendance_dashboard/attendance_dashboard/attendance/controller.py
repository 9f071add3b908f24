from __future__ import annotations

import io
from datetime import date, datetime

from flask import Flask, jsonify, request, send_file

from ..common.datetime_utils import now_local, parse_iso_date
from ..container import Container
from ..core.enums import DisplayMode
from ..core.exceptions import ExportError, ValidationError
from ..core.logging import get_logger
from ..display.theme import ThemeConfig, resolve_display_mode
from ..exports.csv_exporter import to_delimited_text
from ..exports.document_exporter import PDF_MIMETYPE, ImageBytesRasterizer, export_document
from ..exports.model import export_filename, summary_report
from ..exports.workbook_exporter import XLSX_MIMETYPE, to_workbook
from .filters import FilterState

logger = get_logger(__name__)


def register(app: Flask, container: Container) -> None:
    def _parse_date(value: str, field_name: str) -> date:
        try:
            return parse_iso_date(value)
        except (TypeError, ValueError):
            raise ValidationError(f"{field_name} phải có dạng YYYY-MM-DD") from None

    def _parse_int(value, field_name: str) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            raise ValidationError(f"{field_name} phải là số nguyên") from None

    def _filters_from_args(args) -> FilterState:
        date_from = args.get("filter_from")
        date_to = args.get("filter_to")
        try:
            return FilterState(
                date_from=_parse_date(date_from, "filter_from") if date_from else None,
                date_to=_parse_date(date_to, "filter_to") if date_to else None,
                employees=frozenset(args.getlist("employee")),
                statuses=frozenset(args.getlist("status")),
                departments=frozenset(args.getlist("department")),
                search_term=args.get("q", ""),
            )
        except ValueError as e:
            # Unknown status code.
            raise ValidationError(str(e)) from None

    def _build_view(view: str, args):
        filters = _filters_from_args(args)
        service = container.dashboard_service

        if view == "day":
            work_date = _parse_date(args.get("date") or now_local().date().isoformat(), "date")
            return service.day_view(work_date, filters)

        if view == "month":
            today = now_local().date()
            to_year = args.get("to_year")
            return service.month_view(
                year=_parse_int(args.get("year", today.year), "year"),
                from_month=_parse_int(args.get("from_month", today.month - 1), "from_month"),
                to_month=_parse_int(args.get("to_month", today.month - 1), "to_month"),
                to_year=_parse_int(to_year, "to_year") if to_year else None,
                filters=filters,
            )

        name = (args.get("name") or "").strip()
        if not name:
            raise ValidationError("Thiếu tham số name")
        return service.person_view(
            name=name,
            range_=args.get("range", "month"),
            on=args.get("on", ""),
            filters=filters,
        )

    def _bad_request(e: Exception):
        return jsonify({"success": False, "message": str(e)}), 400

    @app.route("/api/options", methods=["GET"], endpoint="api_options")
    def api_options():
        return jsonify({"success": True, "data": container.dashboard_service.options()})

    @app.route("/api/<any(day, month, person):view>", methods=["GET"], endpoint="api_view")
    def api_view(view: str):
        try:
            report = _build_view(view, request.args)
        except ValidationError as e:
            return _bad_request(e)
        return jsonify({"success": True, "data": report.to_dict()})

    @app.route("/export/<any(day, month, person):view>.<any(csv, xlsx):fmt>", methods=["GET"], endpoint="export_view")
    def export_view(view: str, fmt: str):
        try:
            report = _build_view(view, request.args)
        except ValidationError as e:
            return _bad_request(e)

        rows = container.dashboard_service.export_rows(report)
        filename = export_filename(app.config["EXPORT_BASENAME"], fmt, now_local())
        logger.info("export %s: %s rows -> %s (%s)", view, len(rows), filename, summary_report(rows))

        if fmt == "csv":
            return app.response_class(
                to_delimited_text(rows),
                mimetype="text/csv",
                headers={"Content-Disposition": f"attachment; filename={filename}"},
            )
        return send_file(
            io.BytesIO(to_workbook(rows)),
            mimetype=XLSX_MIMETYPE,
            as_attachment=True,
            download_name=filename,
        )

    @app.route("/export/pdf", methods=["POST"], endpoint="export_pdf")
    def export_pdf():
        upload = request.files.get("surface")
        target = upload.read() if upload else None
        try:
            pdf_bytes = export_document(ImageBytesRasterizer(), target)
        except ExportError as e:
            logger.error("pdf export failed: %s", e)
            return jsonify({"success": False, "message": e.user_message}), 422

        filename = export_filename(app.config["EXPORT_BASENAME"], "pdf", now_local())
        logger.info("export pdf -> %s", filename)
        return send_file(io.BytesIO(pdf_bytes), mimetype=PDF_MIMETYPE, as_attachment=True, download_name=filename)

    @app.route("/api/display-mode", methods=["GET"], endpoint="api_display_mode")
    def api_display_mode():
        args = request.args
        try:
            config = ThemeConfig(
                mode=args.get("mode", DisplayMode.LIGHT.value),
                custom_theme=args.get("theme", "default"),
                auto_mode=args.get("auto", "1") not in {"0", "false"},
                dark_start=args.get("dark_start", "18:00"),
                light_start=args.get("light_start", "06:00"),
            )
            at = args.get("at")
            now = datetime.fromisoformat(at) if at else now_local()
        except (ValueError, ValidationError) as e:
            return _bad_request(e)

        mode = resolve_display_mode(config, now, prefers_dark=args.get("prefers_dark") in {"1", "true"})
        return jsonify({"success": True, "data": {"mode": mode.value}})
