"""HTTP routes for the public nomination form."""

from flask import flash, redirect, render_template, request, url_for

from errors import ValidationError
from modules.nominations.services import submit_nomination

from . import bp


@bp.route("/nominate", methods=["GET", "POST"])
def nominate():
    if request.method == "POST":
        try:
            submit_nomination(request.form)
        except ValidationError as exc:
            return render_template(
                "nominations/nominate.html", form=request.form, errors=exc.errors,
            ), 400

        flash("Nomination submitted successfully!", "success")
        return redirect(url_for("nominations.nominate"))

    return render_template("nominations/nominate.html", form={}, errors={})
