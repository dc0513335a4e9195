# app.py
import logging
from functools import lru_cache
from typing import Optional

from fastapi import Depends, FastAPI, File, Form, Request, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

import config
from schemas import AnalysisResult, ImagePayload, LashMapResponse, normalize_language, normalize_mode
from services.analysis import LashAnalyzer
from services.classifier import LashClassifier
from services.lash_map import placeholder_map
from services.openai_gateway import build_gateway
from services.report import ReportGenerator

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Lash analysis API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# room for multipart boundaries and the other form fields
MULTIPART_OVERHEAD = 64 * 1024


@app.middleware("http")
async def limit_request_size(request: Request, call_next):
    """Refuse oversized bodies from Content-Length before Starlette spools the multipart form."""
    length = request.headers.get("content-length")
    if length and length.isdigit() and int(length) > config.MAX_UPLOAD_BYTES + MULTIPART_OVERHEAD:
        return JSONResponse(status_code=413, content={"error": f"Request too large (max {config.MAX_UPLOAD_BYTES} bytes of image)."})
    return await call_next(request)


# --- Wiring --------------------------------------------------------------
@lru_cache(maxsize=1)
def get_analyzer() -> LashAnalyzer:
    """One gateway shared by both model steps; tests swap this via dependency_overrides."""
    gateway = build_gateway()
    return LashAnalyzer(LashClassifier(gateway), ReportGenerator(gateway))


# --- Upload helpers ------------------------------------------------------
class UploadError(Exception):
    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


@app.exception_handler(UploadError)
async def upload_error_handler(request: Request, exc: UploadError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


def read_image(file: Optional[UploadFile]) -> ImagePayload:
    """Read the upload into memory, enforcing MAX_UPLOAD_BYTES on the image itself."""
    if file is None:
        raise UploadError(400, "No image in the request (field 'image').")
    data = file.file.read(config.MAX_UPLOAD_BYTES + 1)
    if not data:
        raise UploadError(400, "The uploaded image is empty.")
    if len(data) > config.MAX_UPLOAD_BYTES:
        raise UploadError(413, f"Image too large (max {config.MAX_UPLOAD_BYTES} bytes).")
    content_type = file.content_type or ""
    if not content_type.startswith("image/"):
        content_type = "image/jpeg"
    return ImagePayload(data=data, content_type=content_type)


# --- Endpoints -----------------------------------------------------------
@app.get("/ping")
def ping():
    return {"status": "Lash analysis backend is running"}


@app.post("/analyze", response_model=AnalysisResult)
def analyze(
    image: Optional[UploadFile] = File(None),
    language: Optional[str] = Form(None),
    mode: Optional[str] = Form(None),
    override_type: Optional[str] = Form(None),
    analyzer: LashAnalyzer = Depends(get_analyzer),
):
    """Classify the lashes in the photo, then return the styling report."""
    payload = read_image(image)
    try:
        return analyzer.analyze(payload, normalize_language(language), normalize_mode(mode), override_type)
    except Exception as e:
        logger.exception("analysis failed")
        return JSONResponse(status_code=500, content={"error": "Lash analysis failed.", "details": str(e)})


@app.post("/generate-map", response_model=LashMapResponse)
def generate_map(
    image: Optional[UploadFile] = File(None),
    language: Optional[str] = Form(None),
):
    """
    Placeholder lash map. The image is required but not analysed yet;
    the response is a fixed sample chosen by language (default Polish).
    """
    read_image(image)
    try:
        return LashMapResponse(map=placeholder_map(normalize_language(language)))
    except Exception as e:
        logger.exception("generate-map failed")
        return JSONResponse(status_code=500, content={"error": "Lash map generation failed.", "details": str(e)})


# If run directly for local dev
if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app:app", host="0.0.0.0", port=config.PORT, reload=True)
