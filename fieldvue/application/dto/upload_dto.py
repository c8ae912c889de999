from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel


@dataclass(frozen=True)
class UploadedFile:
    """A file received by the API layer, already read into memory"""
    filename: str
    content_type: Optional[str]
    data: bytes


class UploadResponse(BaseModel):
    success: bool = True
    uri: str
    public_url: Optional[str] = None
    key: str
    content_type: Optional[str] = None
    size: int
