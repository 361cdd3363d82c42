"""
retry_notifications.py: re-send nomination e-mails that failed earlier.

    python retry_notifications.py                  -> retry with NOTIFICATION_MAX_ATTEMPTS
    python retry_notifications.py --max-attempts 10
"""

import argparse
import sys

from app import create_app
from modules.nominations.notifications import retry_pending


def main(argv=None):
    parser = argparse.ArgumentParser(description="Retry pending nomination e-mails")
    parser.add_argument("--max-attempts", type=int, default=None,
                        help="skip notices that already failed this many times")
    args = parser.parse_args(argv)

    app = create_app()
    with app.app_context():
        sent, failed = retry_pending(args.max_attempts)
    print(f"Sent: {sent}, still pending: {failed}")
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
