"""
Prompt templates for the vision detection model.

Both scene types ask for the same JSON shape; only the element list and the
scale hints differ. The reducer does not depend on the wording.
"""

from ...domain.constants.enums import SceneType

_RESPONSE_SHAPE = """
Respond with a single JSON object and nothing else:
{
  "objects": [
    {
      "name": "short description",
      "type": "element type",
      "confidence": "high" | "medium" | "low",
      "bounding_box": {"x": 0-100, "y": 0-100, "width": 0-100, "height": 0-100},
      "estimated_width_feet": number,
      "estimated_height_feet": number,
      "surface_area": number
    }
  ],
  "room_dimensions": {
    "estimated_width": number,
    "estimated_height": number,
    "estimated_length": number
  },
  "scene": "what the photo shows",
  "summary": "the clearly visible construction elements"
}
"""

_ZOOM_HINT = (
    "The photo was taken at {zoom}x zoom. Above 1x objects look larger than they are, "
    "so scale estimates down; below 1x scale them up."
)

_INTERIOR_PROMPT = """You estimate painting and finishing work from interior photos.
List every clearly visible wall, ceiling, window, door, baseboard, crown moulding,
trim and railing. Use standard sizes (doors about 3x7 ft, ceilings about 8-9 ft)
to keep scale consistent across objects. Give one entry per physical element.
Mark confidence "medium" or "low" when an element is partly hidden or its size
is a guess. Leave room_dimensions out when the room extent cannot be judged.
{zoom_hint}
{shape}"""

_EXTERIOR_PROMPT = """You estimate exterior renovation work from photos of a building elevation.
List every clearly visible siding section, foundation band, window, door,
roof plane, gutter, trim run and railing. Report brick or stone cladding as
siding; use type "foundation" only for the band at the base of the wall.
Use standard sizes (doors about 3x7 ft, stories about 9-10 ft) for scale.
Mark confidence "medium" or "low" when an element is partly hidden or its
size is a guess. Omit room_dimensions.
{zoom_hint}
{shape}"""


def build_detection_prompt(scene_type: SceneType, zoom: float = 1.0) -> str:
    """Render the prompt for a scene type and zoom level."""
    template = _EXTERIOR_PROMPT if SceneType(scene_type) == SceneType.EXTERIOR else _INTERIOR_PROMPT
    return template.format(zoom_hint=_ZOOM_HINT.format(zoom=f"{zoom:g}"), shape=_RESPONSE_SHAPE)
