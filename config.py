import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

OPENAI_API_KEY: Optional[str] = os.getenv("OPENAI_API_KEY")

CLASSIFY_MODEL: str = os.getenv("CLASSIFY_MODEL", "gpt-4.1-mini")
REPORT_MODEL: str = os.getenv("REPORT_MODEL", "gpt-4o-mini")
REPORT_TEMPERATURE: float = float(os.getenv("REPORT_TEMPERATURE", "0.4"))
# seconds; unset means the client default
OPENAI_TIMEOUT: Optional[float] = float(os.environ["OPENAI_TIMEOUT"]) if os.getenv("OPENAI_TIMEOUT") else None

MAX_UPLOAD_BYTES: int = int(os.getenv("MAX_UPLOAD_BYTES", str(8 * 1024 * 1024)))
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
PORT: int = int(os.getenv("PORT", "10000"))

# used by ui.py
API_BASE: str = os.getenv("API_BASE", "http://127.0.0.1:10000")
