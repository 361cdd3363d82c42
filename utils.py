from datetime import datetime, timezone
from urllib.parse import urlsplit


def utcnow() -> datetime:
    """Naive UTC timestamp, the format stored in DateTime columns."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def is_safe_redirect(target):
    """Only same-site absolute paths may be used as a post-login target."""
    if not target:
        return False
    parts = urlsplit(target)
    return not parts.scheme and not parts.netloc and target.startswith('/') and not target.startswith('//')


def wants_json(request):
    accept = request.accept_mimetypes
    return accept.accept_json and not accept.accept_html
