from .base import *

DEBUG = False
ALLOWED_HOSTS = ["testserver", "localhost"]

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

WHITENOISE_AUTOREFRESH = True

# let pytest's caplog see application records
LOGGING["loggers"]["apps"]["propagate"] = True
