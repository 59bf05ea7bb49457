from .base import *
DEBUG = False
ALLOWED_HOSTS = os.getenv("ALLOWED_HOSTS", "example.com").split(",")

STORAGES = {
    "default": {"BACKEND": "django.core.files.storage.FileSystemStorage"},
    "staticfiles": {"BACKEND": "whitenoise.storage.CompressedManifestStaticFilesStorage"},
}

# Exemple Postgres :
# DATABASES = {
#   "default": {
#     "ENGINE": "django.db.backends.postgresql",
#     "NAME": os.getenv("POSTGRES_DB","inventory"),
#     "USER": os.getenv("POSTGRES_USER","inventory"),
#     "PASSWORD": os.getenv("POSTGRES_PASSWORD",""),
#     "HOST": os.getenv("POSTGRES_HOST","db"),
#     "PORT": os.getenv("POSTGRES_PORT","5432"),
#   }
# }
