from __future__ import annotations
import os

APP_TITLE = "Transition Brief Form"
LOGO_URL = "https://transitioneg.com/assets/logo/logo-icon.png"

RELAY_URL = os.getenv("RELAY_URL", "http://localhost:3000")
PUBLIC_BASE_URL = os.getenv("PUBLIC_BASE_URL", "http://localhost:8501")
REQUEST_TIMEOUT = int(os.getenv("REQUEST_TIMEOUT", "120"))
