"""Request and response bodies for the JSON API.

Python attributes are snake_case; the wire format is camelCase.
"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ============== Records ==============

class ImageRecord(ApiModel):
    """One discovered image, keyed by its user-visible path."""
    id: str
    name: str
    path: str
    relative_path: str
    tags: List[str]
    text_file_path: str
    width: Optional[int] = None
    height: Optional[int] = None
    directory: str


class DirectoryEntry(ApiModel):
    name: str
    path: str


# ============== Requests ==============

class DirectoryRequest(ApiModel):
    directory_path: Optional[str] = None


class ScanRequest(ApiModel):
    directory_path: Optional[str] = None
    include_subfolders: bool = False


class UpdateTagsRequest(ApiModel):
    text_file_path: Optional[str] = None
    tags: List[str]


class SelectedImage(ApiModel):
    id: str
    text_file_path: Optional[str] = None
    tags: List[str] = []


class SelectionRequest(ApiModel):
    images: List[SelectedImage] = []


class SelectionTagRequest(ApiModel):
    images: List[SelectedImage] = []
    tag: Optional[str] = None


# ============== Responses ==============

class HealthResponse(ApiModel):
    status: str
    message: str


class ListDirectoryResponse(ApiModel):
    directories: List[DirectoryEntry]
    current_path: str
    parent_path: Optional[str] = None


class ScanResponse(ApiModel):
    images: List[ImageRecord]


class MessageResponse(ApiModel):
    success: bool
    message: str


class TagInfoOut(ApiModel):
    tag: str
    count: int
    is_common: bool


class TagAnalysisResponse(ApiModel):
    tags: List[TagInfoOut]
    total_images: int


class UpdatedImage(ApiModel):
    id: str
    tags: List[str]


class FailedImage(ApiModel):
    id: str
    error: str


class BatchUpdateResponse(ApiModel):
    success: bool
    message: str
    updated: List[UpdatedImage]
    failed: List[FailedImage]
