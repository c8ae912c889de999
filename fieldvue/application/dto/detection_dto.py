from typing import Any, Dict

from pydantic import BaseModel

from ...domain.constants.enums import SceneType


class ObjectDetectionResponse(BaseModel):
    success: bool = True
    type: SceneType
    analysis: Dict[str, Any]
