"""Blob keys for uploaded files: uploads/{user}/{job|no-job}/{room|no-room}/{ms}-{rand}.{ext}"""

import re
import secrets
from datetime import datetime
from pathlib import PurePosixPath
from typing import Optional

from ....domain.constants import IMAGE_MIME_EXTENSIONS, UPLOADS_KEY_PREFIX
from ....utils.datetime_utils import utc_now

_UNSAFE = re.compile(r"[^A-Za-z0-9_-]")


def _segment(value: Optional[str]) -> str:
    return _UNSAFE.sub("", value or "")


def build_upload_key(
    user_id: str,
    filename: Optional[str],
    job_id: Optional[str] = None,
    room_id: Optional[str] = None,
    now: Optional[datetime] = None,
    content_type: Optional[str] = None,
) -> str:
    """
    Build a collision-resistant key; every segment is reduced to [A-Za-z0-9_-].

    A known image content_type picks the extension; otherwise the filename's
    suffix is used.
    """
    extension = IMAGE_MIME_EXTENSIONS.get(content_type or "") or (
        _segment(PurePosixPath(filename or "").suffix.lstrip(".").lower()) or "bin"
    )
    timestamp = int((now or utc_now()).timestamp() * 1000)
    return "/".join([
        UPLOADS_KEY_PREFIX,
        _segment(user_id) or "anonymous",
        _segment(job_id) or "no-job",
        _segment(room_id) or "no-room",
        f"{timestamp}-{secrets.token_hex(4)}.{extension}",
    ])
