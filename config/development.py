import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# Payroll backend (REST). Defaults to a backend running on the same machine.
API_CONFIG = {
    "base_url": os.getenv("API_BASE_URL", "http://0.0.0.0:5000"),
    "timeout": float(os.getenv("API_TIMEOUT", "10")),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
