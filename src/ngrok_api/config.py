"""Client configuration constants."""

import os

CLIENT_VERSION = "0.1.0"
API_VERSION = "2"

DEFAULT_BASE_URL = os.environ.get("NGROK_API_URL", "https://api.ngrok.com")
DEFAULT_TIMEOUT = 30.0  # seconds
USER_AGENT = f"ngrok-api-python/{CLIENT_VERSION}"

# Environment variable name for API key
NGROK_API_KEY_ENV = "NGROK_API_KEY"
