"""
Shared constants for image uploads.

Used by upload validation and upload key generation.
"""

ALLOWED_IMAGE_EXTENSIONS = frozenset({".jpg", ".jpeg", ".png", ".webp"})

# Stored extension for each image type accepted after decoding
IMAGE_MIME_EXTENSIONS = {
    "image/jpeg": "jpg",
    "image/png": "png",
    "image/webp": "webp",
}

# Key prefix for objects written through the uploads API
UPLOADS_KEY_PREFIX = "uploads"
