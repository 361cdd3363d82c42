"""Nomination lifecycle and listing queries.

    submit  -> pending (nominees bucket)
    approve    pending -> approved (devs bucket), same id
    delete     removes a record from the bucket it is in
    edit       updates fields in place; id, bucket and created_at stay put

Approve and delete are single conditional statements, so a second click
on a stale page affects zero rows and surfaces as ``RecordNotFound``.
"""

import logging
from typing import List, Mapping, Optional

from sqlalchemy import delete as sql_delete
from sqlalchemy import update
from sqlalchemy.orm.exc import StaleDataError

from errors import RateLimited, RecordNotFound
from extensions import db, rate_limiter
from modules.nominations.models import APPROVED, PENDING, Record, bucket_status
from modules.nominations.notifications import deliver, queue_nomination_notice
from modules.nominations.schemas import ListingFilter, validate_nomination

logger = logging.getLogger(__name__)

NOMINATE_ACTION = "nominate"
EDIT_ACTION = "edit"


# ---------- queries ----------

def list_records(bucket: str, filters: Optional[ListingFilter] = None,
                 newest_first: bool = True) -> List[Record]:
    """Records of one bucket matching ``filters`` (name substring AND expertise set)."""
    query = Record.query.filter(Record.status == bucket_status(bucket))
    if filters is not None:
        if filters.query:
            query = query.filter(Record.name.icontains(filters.query, autoescape=True))
        if filters.expertise:
            query = query.filter(Record.expertise.in_(filters.expertise))
    if newest_first:
        query = query.order_by(Record.created_at.desc(), Record.id.desc())
    else:
        query = query.order_by(Record.created_at.asc(), Record.id.asc())
    return query.all()


def get_record(bucket: str, record_id: int) -> Record:
    record = (Record.query
              .filter_by(id=record_id, status=bucket_status(bucket))
              .one_or_none())
    if record is None:
        raise RecordNotFound(bucket, record_id)
    return record


# ---------- transitions ----------

def _check_rate_limit(action: str) -> None:
    if not rate_limiter.limit(action):
        raise RateLimited(action)


def submit_nomination(form: Mapping) -> Record:
    """Validate and store a new nominee, then try to send the e-mail notice."""
    payload = validate_nomination(form)
    _check_rate_limit(NOMINATE_ACTION)

    record = Record(status=PENDING, **payload.record_fields())
    db.session.add(record)
    db.session.flush()
    notification = queue_nomination_notice(record)
    db.session.commit()
    logger.info("Nominee %s (%r) submitted", record.id, record.name)

    deliver(notification)
    return record


def approve(record_id: int) -> Record:
    result = db.session.execute(
        update(Record)
        .where(Record.id == record_id, Record.status == PENDING)
        .values(status=APPROVED)
        .execution_options(synchronize_session="evaluate")
    )
    if result.rowcount == 0:
        db.session.rollback()
        raise RecordNotFound("nominees", record_id)
    db.session.commit()
    logger.info("Nominee %s approved", record_id)
    return db.session.get(Record, record_id)


def delete(bucket: str, record_id: int) -> None:
    result = db.session.execute(
        sql_delete(Record)
        .where(Record.id == record_id, Record.status == bucket_status(bucket))
        .execution_options(synchronize_session="evaluate")
    )
    if result.rowcount == 0:
        db.session.rollback()
        raise RecordNotFound(bucket, record_id)
    db.session.commit()
    logger.info("Record %s deleted from %s", record_id, bucket)


def edit(bucket: str, record_id: int, form: Mapping) -> Record:
    """Overwrite the editable fields of a record in whichever bucket it is in."""
    record = get_record(bucket, record_id)
    payload = validate_nomination(form)
    _check_rate_limit(EDIT_ACTION)

    for field, value in payload.record_fields().items():
        setattr(record, field, value)
    try:
        db.session.commit()
    except StaleDataError:
        db.session.rollback()
        raise RecordNotFound(bucket, record_id) from None
    logger.info("Record %s in %s edited", record_id, bucket)
    return record
