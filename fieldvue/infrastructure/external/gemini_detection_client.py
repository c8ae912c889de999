"""Google Gemini vision detection client (google-genai)."""

# Standard library imports
import json
import logging
import re
from typing import Any, Dict, Optional

# External package imports
from google import genai
from google.genai import errors as genai_errors
from google.genai import types

# Local application imports
from ...core.config import get_settings
from ...core.exceptions import DetectionServiceError, MalformedDetectionError
from ...domain.constants.enums import SceneType
from ...domain.gateways.detection_client import DetectionClient
from .prompts import build_detection_prompt

logger = logging.getLogger(__name__)

_JSON_OBJECT = re.compile(r"\{[\s\S]*\}")


def extract_json_object(text: Optional[str]) -> Dict[str, Any]:
    """
    Pull the outermost JSON object out of a model response.

    Handles bare JSON as well as JSON wrapped in prose or markdown fences.

    Raises:
        MalformedDetectionError: If no JSON object can be decoded
    """
    if not text or not text.strip():
        raise MalformedDetectionError("Empty response from detection model", raw_response=text)

    match = _JSON_OBJECT.search(text)
    if match is None:
        raise MalformedDetectionError("No JSON object in detection response", raw_response=text)

    try:
        payload = json.loads(match.group(0))
    except json.JSONDecodeError as e:
        raise MalformedDetectionError(f"Invalid JSON in detection response: {e}", raw_response=text)

    if not isinstance(payload, dict):
        raise MalformedDetectionError("Detection response is not a JSON object", raw_response=text)
    return payload


class GeminiDetectionClient(DetectionClient):
    """
    Detection client that prompts a Gemini model with one image.

    Uses Vertex AI when a Google project is configured, otherwise the
    Gemini API with an API key.
    """

    def __init__(self, client: Optional[genai.Client] = None, model_name: Optional[str] = None) -> None:
        settings = get_settings()
        self.model_name = model_name or settings.vision_model_name
        self._client = client

    @property
    def client(self) -> genai.Client:
        if self._client is None:
            self._client = self._create_client(get_settings())
        return self._client

    @staticmethod
    def _create_client(settings) -> genai.Client:
        http_options = types.HttpOptions(timeout=int(settings.detection_timeout_seconds * 1000))
        if settings.google_project_id:
            return genai.Client(
                vertexai=True,
                project=settings.google_project_id,
                location=settings.google_location,
                http_options=http_options,
            )
        if not settings.google_api_key:
            raise DetectionServiceError(
                "Neither GOOGLE_PROJECT_ID nor GOOGLE_API_KEY is set",
                retryable=False,
            )
        return genai.Client(api_key=settings.google_api_key, http_options=http_options)

    async def detect(
        self,
        image_bytes: bytes,
        mime_type: str,
        scene_type: SceneType,
        zoom: float = 1.0,
    ) -> Dict[str, Any]:
        """
        Run object detection on one image.

        Args:
            image_bytes: Raw image
            mime_type: Image MIME type
            scene_type: interior or exterior prompt
            zoom: Camera zoom factor passed to the prompt

        Returns:
            Decoded JSON payload from the model
        """
        prompt = build_detection_prompt(scene_type, zoom)
        client = self.client
        try:
            response = await client.aio.models.generate_content(
                model=self.model_name,
                contents=[
                    types.Part.from_bytes(data=image_bytes, mime_type=mime_type or "image/jpeg"),
                    prompt,
                ],
                config=types.GenerateContentConfig(
                    temperature=0.1,
                    response_mime_type="application/json",
                ),
            )
        except genai_errors.ClientError as e:
            # 429 is a quota hit and worth retrying; other 4xx are not
            raise DetectionServiceError(
                f"Gemini rejected detection request: {e}",
                retryable=getattr(e, "code", None) == 429,
            ) from e
        except genai_errors.APIError as e:
            raise DetectionServiceError(f"Gemini detection call failed: {e}") from e
        except Exception as e:
            logger.error(f"Unexpected error calling Gemini: {e}", exc_info=True)
            raise DetectionServiceError(f"Gemini detection call failed: {e}") from e

        payload = extract_json_object(response.text)
        logger.debug(f"Gemini returned {len(payload.get('objects') or [])} objects for {SceneType(scene_type).value} image")
        return payload
