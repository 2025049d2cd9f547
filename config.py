import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./invoices.db")
    CREATE_TABLES_ON_STARTUP = bool(data.get("CREATE_TABLES_ON_STARTUP", True))
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    API_RELOAD = bool(data.get("API_RELOAD", False))
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))

    # The upstream auth service sets X-Account-Id on every request.
    # With AUTH_DISABLED, requests without the header act as DEFAULT_ACCOUNT_ID.
    AUTH_DISABLED = bool(data.get("AUTH_DISABLED", False))
    DEFAULT_ACCOUNT_ID = int(data.get("DEFAULT_ACCOUNT_ID", 1))

    # Invoice document
    CURRENCY_PREFIX = data.get("CURRENCY_PREFIX", "$")
    INVOICE_FOOTER_TEXT = data.get("INVOICE_FOOTER_TEXT", "Thank you for your business!")
