"""Validation rules for nomination forms and listing filters."""

import pytest
from werkzeug.datastructures import MultiDict

from errors import ValidationError
from modules.nominations.schemas import parse_listing_filter, validate_nomination


def test_valid_form_is_normalised(nomination_form):
    nomination_form["name"] = "  Ana Gomez  "

    payload = validate_nomination(nomination_form)

    assert payload.name == "Ana Gomez"
    assert payload.record_fields() == {
        "name": "Ana Gomez",
        "province": "Córdoba",
        "expertise": "backend",
        "link": "https://example.com/ana",
        "reason": nomination_form["reason"],
    }


def test_link_is_kept_as_typed(nomination_form):
    nomination_form["link"] = "https://github.com/ana"

    assert validate_nomination(nomination_form).link == "https://github.com/ana"


def test_short_reason_is_rejected(nomination_form):
    nomination_form["reason"] = "x" * 40

    with pytest.raises(ValidationError) as excinfo:
        validate_nomination(nomination_form)

    assert excinfo.value.errors == {
        "reason": ["Your explanation should have at least 70 (seventy) characters"],
    }


def test_reason_length_counts_trimmed_text(nomination_form):
    nomination_form["reason"] = "   " + "x" * 69 + "   "

    with pytest.raises(ValidationError) as excinfo:
        validate_nomination(nomination_form)

    assert list(excinfo.value.errors) == ["reason"]


def test_every_failing_field_is_reported():
    form = {
        "name": "x" * 101,
        "from": "Narnia",
        "expertise": "devops",
        "link": "not a url",
        "reason": "y" * 301,
    }

    with pytest.raises(ValidationError) as excinfo:
        validate_nomination(form)

    errors = excinfo.value.errors
    assert set(errors) == {"name", "from", "expertise", "link", "reason"}
    assert errors["name"] == ["Name should have at most 100 (hundred) characters"]
    assert errors["link"] == ["Invalid URL"]
    assert errors["reason"] == ["Your explanation should have at most 300 (three hundred) characters"]


def test_blank_fields_report_required_messages():
    with pytest.raises(ValidationError) as excinfo:
        validate_nomination({"name": "   ", "link": ""})

    errors = excinfo.value.errors
    assert errors["name"] == ["Please provide the nominee’s name"]
    assert errors["from"] == ["Please select a province where the nominee is from"]
    assert errors["expertise"] == ["Please select an area of expertise"]
    assert errors["link"] == ["Please provide a link to their work"]
    assert errors["reason"] == ["Please take a moment to explain why you are nominating this person"]


@pytest.mark.parametrize("link", [
    "example.com/ana",
    "https://",
    "ana at example",
    "javascript://example.com/%0Aalert(document.cookie)",
    "ftp://example.com/ana",
])
def test_link_must_be_absolute_url(nomination_form, link):
    nomination_form["link"] = link

    with pytest.raises(ValidationError) as excinfo:
        validate_nomination(nomination_form)

    assert excinfo.value.errors == {"link": ["Invalid URL"]}


def test_link_too_long(nomination_form):
    nomination_form["link"] = "https://example.com/" + "a" * 190

    with pytest.raises(ValidationError) as excinfo:
        validate_nomination(nomination_form)

    assert excinfo.value.errors == {"link": ["Link should have at most 200 (two hundred) characters"]}


def test_expertise_label_is_not_a_value(nomination_form):
    nomination_form["expertise"] = "Backend Developer"

    with pytest.raises(ValidationError) as excinfo:
        validate_nomination(nomination_form)

    assert list(excinfo.value.errors) == ["expertise"]


def test_listing_filter_defaults():
    filters = parse_listing_filter(MultiDict())

    assert filters.query is None
    assert filters.expertise == ()
    assert not filters.active


def test_listing_filter_reads_repeated_expertise():
    filters = parse_listing_filter(MultiDict([
        ("query", "  ana "), ("expertise", "qa"), ("expertise", "backend"), ("expertise", "qa"),
    ]))

    assert filters.query == "ana"
    assert filters.expertise == ("qa", "backend")
    assert filters.active


def test_listing_filter_rejects_unknown_expertise():
    with pytest.raises(ValidationError) as excinfo:
        parse_listing_filter(MultiDict([("expertise", "qa"), ("expertise", "devops")]))

    assert excinfo.value.errors == {"expertise": ["Unknown expertise 'devops'"]}
