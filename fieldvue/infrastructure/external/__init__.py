from .gemini_detection_client import GeminiDetectionClient, extract_json_object
from .http_detection_client import HttpDetectionClient
from .prompts import build_detection_prompt

__all__ = [
    "GeminiDetectionClient",
    "HttpDetectionClient",
    "extract_json_object",
    "build_detection_prompt",
]
