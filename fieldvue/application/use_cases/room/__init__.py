from .create_room import CreateRoomUseCase
from .list_rooms import ListRoomsUseCase
from .get_room import GetRoomUseCase
from .list_room_images import ListRoomImagesUseCase
from .delete_room_image import DeleteRoomImageUseCase
from .reanalyze_room import ReanalyzeRoomUseCase
from .room_access import load_accessible_room

__all__ = [
    "CreateRoomUseCase",
    "ListRoomsUseCase",
    "GetRoomUseCase",
    "ListRoomImagesUseCase",
    "DeleteRoomImageUseCase",
    "ReanalyzeRoomUseCase",
    "load_accessible_room",
]
