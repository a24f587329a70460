"""FastAPI routes for LoRA Tagger."""
from datetime import datetime
from pathlib import Path

from fastapi import Query
from fastapi.responses import FileResponse, HTMLResponse
from jinja2 import Environment, FileSystemLoader, select_autoescape
from loguru import logger

from database import get_setting, set_setting
from errors import FileAccessError, NotFoundError, ValidationError
from paths import translator
from scanner import is_image_name, list_directories, parent_of, scan_images
from schemas import (
    BatchUpdateResponse,
    DirectoryRequest,
    FailedImage,
    HealthResponse,
    ListDirectoryResponse,
    MessageResponse,
    ScanRequest,
    ScanResponse,
    SelectionRequest,
    SelectionTagRequest,
    TagAnalysisResponse,
    TagInfoOut,
    UpdatedImage,
    UpdateTagsRequest,
)
from selection import add_new_tag, analyze_tags, commit_changes, toggle_tag
from tagfiles import clean_tags, write_tags
from thumbnails import MAX_WIDTH, MIN_WIDTH, ensure_thumbnail

# Configuration
APP_DIR = Path(__file__).resolve().parent
TEMPLATES_DIR = APP_DIR / "templates"

# Jinja environment
jinja_env = Environment(
    loader=FileSystemLoader(str(TEMPLATES_DIR)),
    autoescape=select_autoescape(["html", "xml"]),
)


def fmt_datetime(value):
    """Format a timestamp for templates."""
    try:
        return datetime.fromtimestamp(float(value)).strftime("%Y-%m-%d %H:%M:%S")
    except (TypeError, ValueError):
        return str(value)


jinja_env.filters["datetime"] = fmt_datetime


def render(name: str, **ctx) -> HTMLResponse:
    """Render template with context."""
    template = jinja_env.get_template(name)
    ctx.setdefault("title", "LoRA Tagger")
    return HTMLResponse(template.render(**ctx))


def resolve_user_path(user_path: str) -> tuple[str, str]:
    """Return ``(user_path, service_path)`` for a path typed by the user."""
    user_path = translator.expand_user(user_path.strip())
    return user_path, translator.to_service_path(user_path)


def index():
    """Gallery page, prefilled with the last scanned directory."""
    return render(
        "index.html",
        last_dir=get_setting("last_directory", ""),
        include_subfolders=get_setting("include_subfolders") == "1",
        last_scan=get_setting("last_scan"),
    )


def health() -> HealthResponse:
    return HealthResponse(status="ok", message="Server is running!")


def list_directory(request: DirectoryRequest) -> ListDirectoryResponse:
    """List the subdirectories of a directory for the folder browser."""
    if not request.directory_path:
        raise ValidationError("Directory path is required")
    user_path, service_path = resolve_user_path(request.directory_path)

    try:
        directories = list_directories(service_path, user_path)
    except OSError as e:
        logger.error("Error listing directory {}: {}", service_path, e)
        raise FileAccessError("Failed to list directory") from e

    return ListDirectoryResponse(
        directories=directories,
        current_path=user_path,
        parent_path=parent_of(user_path),
    )


def scan_directory(request: ScanRequest) -> ScanResponse:
    """Find every image in a directory and load its tags."""
    if not request.directory_path:
        raise ValidationError("Directory path is required")
    user_path, service_path = resolve_user_path(request.directory_path)
    logger.info(
        "Scan request: {} (service path {}, include subfolders: {})",
        user_path, service_path, request.include_subfolders,
    )

    try:
        images = scan_images(service_path, user_path, request.include_subfolders)
    except OSError as e:
        logger.error("Error scanning directory {}: {}", service_path, e)
        raise FileAccessError("Failed to scan directory") from e

    set_setting("last_directory", user_path)
    set_setting("include_subfolders", "1" if request.include_subfolders else "0")
    set_setting("last_scan", str(datetime.now().timestamp()))
    return ScanResponse(images=images)


def _image_file(encoded_path: str) -> Path:
    _user_path, service_path = resolve_user_path(encoded_path)
    real = Path(service_path)
    if not is_image_name(real.name) or not real.is_file():
        raise NotFoundError("Image not found")
    return real


def image(encoded_path: str):
    """Serve the original image bytes."""
    return FileResponse(_image_file(encoded_path))


def thumbnail(encoded_path: str, w: int = Query(360, ge=MIN_WIDTH, le=MAX_WIDTH)):
    """Serve a cached thumbnail, or the original if it can't be decoded."""
    real = _image_file(encoded_path)
    try:
        return FileResponse(ensure_thumbnail(real, w), media_type="image/jpeg")
    except Exception as e:
        logger.warning("Thumbnail failed for {}, serving original: {}", real, e)
        return FileResponse(real)


def update_tags(request: UpdateTagsRequest) -> MessageResponse:
    """Overwrite one image's sidecar file with a new tag list."""
    if not request.text_file_path:
        raise ValidationError("Text file path is required")
    _user_path, service_path = resolve_user_path(request.text_file_path)

    try:
        write_tags(service_path, clean_tags(request.tags))
    except OSError as e:
        logger.error("Error updating tags in {}: {}", service_path, e)
        raise FileAccessError("Failed to update tags") from e

    return MessageResponse(success=True, message="Tags updated successfully")


def analyze_selection(request: SelectionRequest) -> TagAnalysisResponse:
    """Common and partial tags across the selected images."""
    selection = {img.id: img.tags for img in request.images}
    analysis = analyze_tags(list(selection.values()))
    return TagAnalysisResponse(
        tags=[TagInfoOut(tag=t.tag, count=t.count, is_common=t.is_common) for t in analysis.tags],
        total_images=analysis.total_images,
    )


def _apply_to_selection(request: SelectionTagRequest, changes: dict) -> BatchUpdateResponse:
    text_files = {img.id: img.text_file_path for img in request.images}
    result = commit_changes(changes, text_files, translator)

    if result.success:
        message = f"Tags updated for {len(result.updated)} images"
    else:
        message = f"Failed to save tags for {len(result.failed)} of {len(changes)} images"
    return BatchUpdateResponse(
        success=result.success,
        message=message,
        updated=[UpdatedImage(id=i, tags=tags) for i, tags in result.updated.items()],
        failed=[FailedImage(id=i, error=err) for i, err in result.failed.items()],
    )


def toggle_selection_tag(request: SelectionTagRequest) -> BatchUpdateResponse:
    """Click on a tag in the selection sidebar: remove if common, else add."""
    if not request.tag:
        raise ValidationError("Tag is required")
    selection = {img.id: clean_tags(img.tags) for img in request.images}
    return _apply_to_selection(request, toggle_tag(selection, request.tag))


def add_selection_tag(request: SelectionTagRequest) -> BatchUpdateResponse:
    """Add a new tag to every selected image that lacks it."""
    selection = {img.id: clean_tags(img.tags) for img in request.images}
    return _apply_to_selection(request, add_new_tag(selection, request.tag))
