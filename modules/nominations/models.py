"""SQLAlchemy models for nominees, approved devs and the notification outbox.

Nominees and devs share one ``records`` table.  The ``status`` column is
the bucket a record lives in: ``pending`` rows are nominees waiting for
review, ``approved`` rows are listed in the public directory.  A record
keeps its id when it is approved; rejecting a nominee deletes the row.
"""

from extensions import db
from utils import utcnow

PROVINCES = (
    "Buenos Aires",
    "Buenos Aires Capital Federal",
    "Catamarca",
    "Chaco",
    "Chubut",
    "Córdoba",
    "Corrientes",
    "Entre Ríos",
    "Formosa",
    "Jujuy",
    "La Pampa",
    "La Rioja",
    "Mendoza",
    "Misiones",
    "Neuquen",
    "Río Negro",
    "Salta",
    "San Juan",
    "San Luís",
    "Santa Cruz",
    "Santa Fe",
    "Santiago del Estero",
    "Tierra del Fuego",
    "Tucumán",
)

EXPERTISE_LABELS = {
    "frontend": "Frontend Developer",
    "backend": "Backend Developer",
    "fullstack": "Fullstack Developer",
    "qa": "QA",
}
EXPERTISE = tuple(EXPERTISE_LABELS)

PENDING = "pending"
APPROVED = "approved"

# bucket name (as used in URLs) -> status value
BUCKETS = {
    "nominees": PENDING,
    "devs": APPROVED,
}


def bucket_status(bucket: str) -> str:
    try:
        return BUCKETS[bucket]
    except KeyError:
        raise ValueError(f"Unknown bucket {bucket!r}; expected one of {sorted(BUCKETS)}") from None


class Record(db.Model):
    """A nominee (``pending``) or an approved dev (``approved``)."""

    __tablename__ = "records"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    province = db.Column(
        "from",
        db.Enum(*PROVINCES, name="province", native_enum=False, validate_strings=True),
        nullable=False,
    )
    expertise = db.Column(
        db.Enum(*EXPERTISE, name="expertise", native_enum=False, validate_strings=True),
        nullable=False,
        index=True,
    )
    link = db.Column(db.String(200), nullable=False)
    reason = db.Column(db.String(300))
    status = db.Column(
        db.Enum(PENDING, APPROVED, name="record_status", native_enum=False, validate_strings=True),
        nullable=False,
        default=PENDING,
        index=True,
    )
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)

    @property
    def bucket(self) -> str:
        return "nominees" if self.status == PENDING else "devs"

    @property
    def expertise_label(self) -> str:
        return EXPERTISE_LABELS.get(self.expertise, self.expertise)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "from": self.province,
            "expertise": self.expertise,
            "link": self.link,
            "reason": self.reason,
            "bucket": self.bucket,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"<Record {self.id} {self.status}: {self.name}>"


NOTIFICATION_PENDING = "pending"
NOTIFICATION_SENT = "sent"


class Notification(db.Model):
    """Outbound e-mail waiting to be (or already) delivered."""

    __tablename__ = "notifications"

    id = db.Column(db.Integer, primary_key=True)
    # no FK: the notice outlives a rejected nominee
    record_id = db.Column(db.Integer, index=True)
    subject = db.Column(db.String(255), nullable=False)
    body = db.Column(db.Text, nullable=False)
    status = db.Column(db.String(16), nullable=False, default=NOTIFICATION_PENDING, index=True)
    attempts = db.Column(db.Integer, nullable=False, default=0)
    last_error = db.Column(db.String(500))
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)
    sent_at = db.Column(db.DateTime)

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"<Notification {self.id} {self.status} ({self.attempts} attempts)>"
