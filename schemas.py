import base64
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict

LashType = Literal["natural", "extensions"]
Language = Literal["pl", "en"]
ReportMode = Literal["standard", "detailed", "pro"]

LASH_TYPES = ("natural", "extensions")
LANGUAGES = ("pl", "en")
REPORT_MODES = ("standard", "detailed", "pro")

DEFAULT_LASH_TYPE: LashType = "extensions"


def normalize_language(value: Optional[str]) -> Language:
    """Anything other than English falls back to Polish."""
    return "en" if (value or "").strip().lower() == "en" else "pl"


def normalize_mode(value: Optional[str]) -> ReportMode:
    v = (value or "").strip().lower()
    return v if v in REPORT_MODES else "standard"


def normalize_lash_type(value: Optional[str]) -> Optional[LashType]:
    """Returns None for anything that is not a known lash type."""
    v = (value or "").strip().lower()
    return v if v in LASH_TYPES else None


class ImagePayload(BaseModel):
    model_config = ConfigDict(frozen=True)

    data: bytes
    content_type: str = "image/jpeg"

    def data_url(self) -> str:
        b64 = base64.b64encode(self.data).decode("ascii")
        return f"data:{self.content_type};base64,{b64}"


class AnalysisResult(BaseModel):
    status: Literal["success"] = "success"
    type: LashType
    mode: ReportMode = "standard"
    result: str


class LashMapResponse(BaseModel):
    map: str
