# Standard library imports
import logging
from typing import Any, Dict, Optional

# External package imports
import httpx

# Local application imports
from ...core.config import get_settings
from ...core.exceptions import DetectionServiceError, MalformedDetectionError
from ...domain.constants.enums import SceneType
from ...domain.gateways.detection_client import DetectionClient
from ..http_client_factory import get_shared_http_client

logger = logging.getLogger(__name__)


class HttpDetectionClient(DetectionClient):
    """
    Detection client for a remote object-detection service.

    Posts the image as multipart ``image`` to ``{base_url}/api/object-detection``
    and accepts either the bare payload or the ``{"success", "analysis"}``
    envelope that this backend's own /ai/object-detection route returns.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        settings = get_settings()
        self.base_url = (base_url or settings.detection_endpoint).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.detection_timeout_seconds
        self._http_client = http_client

    @property
    def http_client(self) -> httpx.AsyncClient:
        return self._http_client if self._http_client is not None else get_shared_http_client()

    async def detect(
        self,
        image_bytes: bytes,
        mime_type: str,
        scene_type: SceneType,
        zoom: float = 1.0,
    ) -> Dict[str, Any]:
        scene = SceneType(scene_type).value
        try:
            response = await self.http_client.post(
                f"{self.base_url}/api/object-detection",
                params={"type": scene, "zoom": zoom},
                files={"image": ("image", image_bytes, mime_type or "application/octet-stream")},
                timeout=self.timeout,
            )
            response.raise_for_status()
        except httpx.TimeoutException as e:
            raise DetectionServiceError(f"Detection API timeout after {self.timeout}s") from e
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.error(f"Detection API HTTP {status}: {e.response.text[:500]}")
            raise DetectionServiceError(
                f"Detection API HTTP {status}",
                retryable=status >= 500 or status == 429,
            ) from e
        except httpx.HTTPError as e:
            raise DetectionServiceError(f"Detection API request failed: {e}") from e

        try:
            body = response.json()
        except ValueError as e:
            raise MalformedDetectionError("Detection API returned non-JSON body", raw_response=response.text) from e

        if isinstance(body, dict) and isinstance(body.get("analysis"), dict):
            body = body["analysis"]
        if not isinstance(body, dict):
            raise MalformedDetectionError("Detection API returned a non-object payload", raw_response=response.text)
        return body
