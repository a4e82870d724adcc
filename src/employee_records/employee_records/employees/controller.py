from __future__ import annotations

from flask import Flask, flash, redirect, render_template, request, url_for
import structlog

from ..container import Container
from ..core.exceptions import ConcurrencyError, ConflictError, DataAccessError, NotFoundError, ValidationError
from .model import EmployeeDraft
from .views import filter_employees, sort_employees

logger = structlog.get_logger(__name__)


def _status_code(error) -> int:
    if isinstance(error, ValidationError):
        return 400
    if isinstance(error, (ConflictError, ConcurrencyError)):
        return 409
    if isinstance(error, NotFoundError):
        return 404
    if isinstance(error, DataAccessError):
        return 503
    return 400


def register(app: Flask, container: Container) -> None:
    service = container.employee_service

    def render_list(*, form=None, show_add_form: bool = False, status: int = 200):
        result = service.load_all()
        if not result.ok:
            flash(result.message, "danger")

        query = request.args.get("q", "")
        sort = request.args.get("sort", "")
        descending = request.args.get("dir", "asc") == "desc"

        employees = filter_employees(result.value or [], query)
        employees = sort_employees(employees, sort, descending=descending)
        return (
            render_template(
                "employees/list.html",
                employees=employees,
                total=len(result.value or []),
                query=query,
                sort=sort,
                descending=descending,
                show_add_form=show_add_form,
                form=form or {"name": "", "email": "", "department": ""},
                active_page="employees",
            ),
            status,
        )

    @app.route("/", endpoint="index")
    def index():
        return redirect(url_for("employees"))

    @app.route("/employees", methods=["GET"], endpoint="employees")
    def employees():
        return render_list(show_add_form=request.args.get("add") == "1")

    @app.route("/employees", methods=["POST"], endpoint="add_employee")
    def add_employee():
        form = {
            "name": request.form.get("name", ""),
            "email": request.form.get("email", ""),
            "department": request.form.get("department", ""),
        }
        try:
            result = service.add_employee(EmployeeDraft(**form))
        except Exception:
            logger.exception("add_employee_failed")
            flash("System error while adding employee", "danger")
            return render_list(form=form, show_add_form=True, status=500)

        if not result.ok:
            flash(result.message, "danger")
            return render_list(form=form, show_add_form=True, status=_status_code(result.error))

        flash(result.message, "success")
        return redirect(url_for("employees"))

    @app.route("/employees/<int:employee_id>/toggle", methods=["POST"], endpoint="toggle_employee")
    def toggle_employee(employee_id: int):
        try:
            result = service.toggle_status(employee_id)
            flash(result.message, "success" if result.ok else "danger")
        except Exception:
            logger.exception("toggle_employee_failed", employee_id=employee_id)
            flash("System error while updating employee", "danger")

        return redirect(url_for("employees"))

    @app.route("/employees/<int:employee_id>/delete", methods=["GET"], endpoint="confirm_delete_employee")
    def confirm_delete_employee(employee_id: int):
        result = service.find_employee(employee_id)
        if not result.ok:
            flash(result.message, "danger")
            return redirect(url_for("employees"))

        return render_template("employees/confirm_delete.html", employee=result.value, active_page="employees")

    @app.route("/employees/<int:employee_id>/delete", methods=["POST"], endpoint="delete_employee")
    def delete_employee(employee_id: int):
        try:
            result = service.remove_employee(employee_id)
            flash(result.message, "success" if result.ok else "danger")
        except Exception:
            logger.exception("delete_employee_failed", employee_id=employee_id)
            flash("System error while deleting employee", "danger")

        return redirect(url_for("employees"))
