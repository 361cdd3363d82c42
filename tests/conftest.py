# tests/conftest.py
import os
import sys
from datetime import timedelta

import pytest

# so that `import app` works when pytest runs from the repo root
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from app import create_app  # noqa: E402
from extensions import db  # noqa: E402
from models import User  # noqa: E402
from modules.nominations.models import PENDING, Record  # noqa: E402
from utils import utcnow  # noqa: E402

ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "s3cret-pass"

REASON = (
    "Ana organises the Córdoba backend meetup and mentors new devs every Friday"
)


@pytest.fixture()
def app():
    app = create_app({
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:",
        "SECRET_KEY": "test-secret",
        "NOTIFICATIONS_ENABLED": False,
        "RESEND_API_KEY": "re_test_key",
        "RESEND_ADDRESS_SENDER": "awc@example.com",
        "RESEND_ADDRESS_RECEIVER": "team@example.com",
    })
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def admin_user(app):
    user = User(email=ADMIN_EMAIL, role="admin")
    user.set_password(ADMIN_PASSWORD)
    db.session.add(user)
    db.session.commit()
    return user


@pytest.fixture()
def admin_credentials():
    return {"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD}


@pytest.fixture()
def admin_client(client, admin_user):
    """Test client whose session belongs to the admin (Flask-Login session keys)."""
    with client.session_transaction() as session:
        session["_user_id"] = str(admin_user.id)
        session["_fresh"] = True
    return client


@pytest.fixture()
def nomination_form():
    return {
        "name": "Ana Gomez",
        "from": "Córdoba",
        "expertise": "backend",
        "link": "https://example.com/ana",
        "reason": REASON,
    }


@pytest.fixture()
def make_record(app):
    """Insert a record directly; ``age`` pushes created_at into the past."""

    def _make(name="Ana Gomez", province="Córdoba", expertise="backend",
              link="https://example.com/ana", reason=REASON, status=PENDING,
              age=timedelta(0)):
        record = Record(
            name=name,
            province=province,
            expertise=expertise,
            link=link,
            reason=reason,
            status=status,
            created_at=utcnow() - age,
        )
        db.session.add(record)
        db.session.commit()
        return record

    return _make
