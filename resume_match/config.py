import os

_TRUTHY = {"1", "true", "True", "yes", "YES"}

# External session / version-history service
RESUME_API_BASE_URL = (os.getenv("RESUME_API_BASE_URL") or "http://127.0.0.1:8000").rstrip("/")
RESUME_API_TIMEOUT_S = float(os.getenv("RESUME_API_TIMEOUT_S", "10") or "10")

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("LOG_FILE") or None

# Flask app
SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-change-me")
COOKIE_SECURE = (os.getenv("COOKIE_SECURE", "0") or "0").strip() in _TRUTHY
MAX_UPLOAD_BYTES = int(os.getenv("MAX_UPLOAD_BYTES", str(1024 * 1024)) or str(1024 * 1024))
ALLOWED_EXTS = {"txt", "text"}
