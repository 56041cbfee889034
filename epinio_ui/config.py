"""
Global Configuration for the Epinio UI suite

Every setting is read from the environment. Behave userdata (``-D KEY=value``)
takes precedence, see ``EnvironmentConfig.load``.
"""

import os

# Console under test
BASE_URL = os.getenv("BASE_URL", "https://localhost:8005")
CLUSTER = os.getenv("CLUSTER", "local")
SYSTEM_DOMAIN = os.getenv("SYSTEM_DOMAIN", "127.0.0.1.sslip.io")

# Credentials consumed by the login page
UI_USERNAME = os.getenv("UI_USERNAME", "admin")
UI_PASSWORD = os.getenv("UI_PASSWORD", "password")

# Browser
HEADLESS = os.getenv("HEADLESS", "true").lower() == "true"
WINDOW_SIZE = (1400, 1000)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Waits, in seconds
DEFAULT_TIMEOUT = float(os.getenv("DEFAULT_TIMEOUT", "4"))
POLL_FREQUENCY = 0.5
MENU_TIMEOUT = 12
CLUSTER_TIMEOUT = 10
LOGIN_TIMEOUT = 15
CREATE_BUTTON_TIMEOUT = 4
NAMESPACE_CREATE_TIMEOUT = 10
PIPELINE_STEP_TIMEOUT = 120
APP_HEADER_TIMEOUT = 5
READINESS_TIMEOUT = 60
NAMESPACE_DELETE_TIMEOUT = 60

# Fixture pushed by the application wizard
FIXTURES_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "features", "fixtures")
SAMPLE_APP = os.getenv("SAMPLE_APP", os.path.join(FIXTURES_DIR, "sample-app.tar.gz"))
UPLOAD_MIME_TYPE = "application/octet-stream"
