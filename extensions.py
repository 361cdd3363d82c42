from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager

from ratelimit import RateLimiter

# Extensions are created unbound and attached in create_app()

# Database
db = SQLAlchemy()

# Admin sessions
login_manager = LoginManager()

# Submission / edit throttling
rate_limiter = RateLimiter()
