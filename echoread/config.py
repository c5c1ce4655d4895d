import os
from pathlib import Path

DB_PATH = os.environ.get("ECHOREAD_DB_PATH", str(Path.cwd() / "echoread.db"))
DATABASE_URL = f"sqlite+aiosqlite:///{DB_PATH}"

LOG_LEVEL = os.environ.get("ECHOREAD_LOG_LEVEL", "INFO").upper()

DEFAULT_CURRENCY = os.environ.get("ECHOREAD_DEFAULT_CURRENCY", "IDR")
