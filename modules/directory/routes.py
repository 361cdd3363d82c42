"""Public pages: the directory of approved devs and the about page."""

from flask import abort, render_template, request

from errors import ValidationError
from modules.nominations.schemas import ListingFilter, parse_listing_filter
from modules.nominations.services import list_records

from . import bp


def filters_from_request() -> ListingFilter:
    """Listing filter for the current request; 400 on unknown expertise values."""
    try:
        return parse_listing_filter(request.args)
    except ValidationError as exc:
        abort(400, description="; ".join(m for msgs in exc.errors.values() for m in msgs))


@bp.route("/")
def index():
    filters = filters_from_request()
    devs = list_records("devs", filters, newest_first=True)
    return render_template("directory/index.html", records=devs, filters=filters)


@bp.route("/about")
def about():
    return render_template("directory/about.html")
