"""
LoRA Tagger – local image tagger for fine-tuning datasets (FastAPI)

Quick start
-----------
1) python -m venv .venv && source .venv/bin/activate  # or .venv\\Scripts\\activate on Windows
2) pip install -e .
3) python app.py  # auto-writes templates/static and the settings DB
4) Open http://localhost:3001 → type or browse to a folder of images → Load

Notes
-----
• Tags live next to each image in a .txt file with the same name ("cat, grey").
  A missing .txt is created empty the first time its image is scanned.
• Thumbnails are cached under ./.thumbs (TAGGER_THUMB_DIR), never in your dataset.
• Running in a container? Mount your home at HOST_HOME and set USER_HOME to the
  host path so the paths you type are translated to the mount.
"""

import locale
import sys

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from loguru import logger

import config
from database import init_db
from errors import TaggerError
from logs import init_logging
from paths import translator
from routes import (
    add_selection_tag,
    analyze_selection,
    health,
    image,
    index,
    list_directory,
    scan_directory,
    thumbnail,
    toggle_selection_tag,
    update_tags,
)
from templates_static import STATIC_DIR, ensure_assets

init_logging()

# Sort names the way the user's locale does
try:
    locale.setlocale(locale.LC_COLLATE, "")
except locale.Error as e:
    logger.warning("Using default collation: {}", e)

# Create FastAPI app
app = FastAPI(title="LoRA Tagger")

# Ensure templates and static files exist
ensure_assets()

# Mount static files
app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")


async def handle_tagger_error(request: Request, exc: TaggerError) -> JSONResponse:
    """Render domain errors as ``{"error": message}``."""
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


app.add_exception_handler(TaggerError, handle_tagger_error)


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed or incomplete request bodies are a 400 in the same shape."""
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{field}: {first.get('msg')}" if field else first.get("msg", "Invalid request")
    else:
        message = "Invalid request"
    logger.debug("Rejected request to {}: {}", request.url.path, errors)
    return JSONResponse(status_code=400, content={"error": f"Invalid request: {message}"})


app.add_exception_handler(RequestValidationError, handle_validation_error)

# Initialize settings database
init_db()
logger.info("Path translation: {}", translator)

# Routes
app.get("/", response_class=HTMLResponse)(index)
app.get("/api/health")(health)
app.post("/api/list-directory")(list_directory)
app.post("/api/scan-directory", response_model_exclude_none=True)(scan_directory)
app.get("/api/image/{encoded_path:path}")(image)
app.get("/api/thumb/{encoded_path:path}")(thumbnail)
app.post("/api/update-tags")(update_tags)

# Multi-image selection
app.post("/api/selection/analyze")(analyze_selection)
app.post("/api/selection/toggle-tag")(toggle_selection_tag)
app.post("/api/selection/add-tag")(add_selection_tag)


def main() -> None:
    # Allow `python app.py 3001`
    port = int(sys.argv[1]) if len(sys.argv) > 1 else config.PORT
    print(f"→ Open http://localhost:{port}")
    import uvicorn

    uvicorn.run("app:app", host=config.HOST, port=port)


if __name__ == "__main__":
    main()
