import os
from datetime import timedelta


def _env_flag(name, default):
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


class Config:
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev_secret_key')
    SQLALCHEMY_DATABASE_URI = os.getenv('DATABASE_URI', 'sqlite:///awc.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

    # Session cookie (admin login lasts a week)
    PERMANENT_SESSION_LIFETIME = timedelta(days=7)
    SESSION_COOKIE_NAME = '__session'
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'
    SESSION_COOKIE_SECURE = _env_flag('SESSION_COOKIE_SECURE', False)

    # Resend e-mail API
    RESEND_API_URL = os.getenv('RESEND_API_URL', 'https://api.resend.com/emails')
    RESEND_API_KEY = os.getenv('RESEND_API_KEY', '')
    RESEND_ADDRESS_SENDER = os.getenv('RESEND_ADDRESS_SENDER', '')
    RESEND_ADDRESS_RECEIVER = os.getenv('RESEND_ADDRESS_RECEIVER', '')
    NOTIFICATIONS_ENABLED = _env_flag('NOTIFICATIONS_ENABLED', True)
    NOTIFICATION_MAX_ATTEMPTS = int(os.getenv('NOTIFICATION_MAX_ATTEMPTS', '5'))
    NOTIFICATION_TIMEOUT = float(os.getenv('NOTIFICATION_TIMEOUT', '20'))

    # Sliding window: RATELIMIT_LIMIT actions per RATELIMIT_WINDOW seconds
    RATELIMIT_ENABLED = _env_flag('RATELIMIT_ENABLED', True)
    RATELIMIT_LIMIT = int(os.getenv('RATELIMIT_LIMIT', '1'))
    RATELIMIT_WINDOW = float(os.getenv('RATELIMIT_WINDOW', '10'))
