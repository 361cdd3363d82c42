"""Admin panel: review nominees, manage the directory, edit records.

Listing pages double as the mutation endpoint: a POST carries ``intent``
and ``recordId``.  HTML clients are redirected back to the listing with a
flash message; clients asking for JSON get a small JSON body instead.
"""

from flask import abort, flash, jsonify, redirect, render_template, request, url_for

from errors import ValidationError
from modules.directory.routes import filters_from_request
from modules.nominations import services
from permissions import admin_required
from utils import wants_json

from . import bp

INTENTS = {
    "nominees": ("approve", "delete", "edit"),
    "devs": ("delete", "edit"),
}

SUCCESS_MESSAGES = {
    ("nominees", "approve"): "Nominee approved successfully",
    ("nominees", "delete"): "Nominee deleted successfully",
    ("devs", "delete"): "Dev deleted successfully",
}


@bp.route("/")
@admin_required
def index():
    return redirect(url_for("admin.nominees"))


@bp.route("/nominees", methods=["GET", "POST"])
@admin_required
def nominees():
    if request.method == "POST":
        return _mutate("nominees")
    # oldest first so nominees are reviewed in the order they arrived
    return _listing("nominees", newest_first=False)


@bp.route("/devs", methods=["GET", "POST"])
@admin_required
def devs():
    if request.method == "POST":
        return _mutate("devs")
    return _listing("devs", newest_first=True)


@bp.route("/<any(nominees, devs):bucket>/<int:record_id>", methods=["GET", "POST"])
@admin_required
def edit(bucket: str, record_id: int):
    record = services.get_record(bucket, record_id)

    if request.method == "POST":
        try:
            services.edit(bucket, record_id, request.form)
        except ValidationError as exc:
            return render_template(
                "admin/edit.html", bucket=bucket, record=record,
                form=request.form, errors=exc.errors,
            ), 400

        label = "Nominee" if bucket == "nominees" else "Dev"
        flash(f"{label} updated successfully", "success")
        return redirect(url_for(f"admin.{bucket}"))

    form = {
        "name": record.name,
        "from": record.province,
        "expertise": record.expertise,
        "link": record.link,
        "reason": record.reason or "",
    }
    return render_template("admin/edit.html", bucket=bucket, record=record, form=form, errors={})


def _listing(bucket: str, newest_first: bool):
    filters = filters_from_request()
    records = services.list_records(bucket, filters, newest_first=newest_first)
    return render_template(f"admin/{bucket}.html", bucket=bucket, records=records, filters=filters)


def _record_id() -> int:
    raw = (request.form.get("recordId") or "").strip()
    if not raw:
        abort(400, description="Record ID is required")
    try:
        return int(raw)
    except ValueError:
        abort(400, description="Record ID must be a number")


def _mutate(bucket: str):
    record_id = _record_id()
    intent = request.form.get("intent")
    if intent not in INTENTS[bucket]:
        abort(400, description="Invalid form intent")

    if intent == "edit":
        services.get_record(bucket, record_id)
        return redirect(url_for("admin.edit", bucket=bucket, record_id=record_id))

    if intent == "approve":
        services.approve(record_id)
    else:
        services.delete(bucket, record_id)

    message = SUCCESS_MESSAGES[(bucket, intent)]
    if wants_json(request):
        return jsonify(status="ok", intent=intent, recordId=record_id, message=message)
    flash(message, "success")
    return redirect(url_for(f"admin.{bucket}"), code=303)
