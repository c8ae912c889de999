"""
Unit tests for the single-image object detection use case.
"""
from io import BytesIO
from unittest.mock import AsyncMock

import pytest
from PIL import Image

from fieldvue.application.dto.upload_dto import UploadedFile
from fieldvue.application.use_cases.detection import DetectObjectsUseCase
from fieldvue.domain.constants.enums import SceneType


@pytest.fixture
def image():
    buffer = BytesIO()
    Image.new("RGB", (4, 4)).save(buffer, format="JPEG")
    return UploadedFile(filename="front.jpg", content_type="image/jpeg", data=buffer.getvalue())


@pytest.fixture
def detection_client():
    client = AsyncMock()
    client.detect.return_value = {"objects": [{"type": "siding", "confidence": "low"}]}
    return client


class TestDetectObjectsUseCase:
    @pytest.mark.asyncio
    async def test_returns_raw_analysis(self, detection_client, image):
        result = await DetectObjectsUseCase(detection_client, 1024 * 1024).execute(image, " Exterior ", zoom=2.0)
        assert result.success
        assert result.type == SceneType.EXTERIOR
        assert result.analysis["objects"][0]["type"] == "siding"
        detection_client.detect.assert_awaited_once_with(image.data, "image/jpeg", SceneType.EXTERIOR, zoom=2.0)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("scene_type", [None, "", "garage"])
    async def test_bad_type(self, detection_client, image, scene_type):
        with pytest.raises(ValueError, match="interior' or 'exterior"):
            await DetectObjectsUseCase(detection_client, 1024 * 1024).execute(image, scene_type)

    @pytest.mark.asyncio
    async def test_missing_image(self, detection_client):
        with pytest.raises(ValueError, match="Image is required"):
            await DetectObjectsUseCase(detection_client, 1024 * 1024).execute(None, "interior")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("zoom", [0, -1, float("nan")])
    async def test_bad_zoom(self, detection_client, image, zoom):
        with pytest.raises(ValueError):
            await DetectObjectsUseCase(detection_client, 1024 * 1024).execute(image, "interior", zoom=zoom)
        detection_client.detect.assert_not_awaited()
