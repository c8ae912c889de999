from .auth_controller import router as auth_router
from .job_controller import router as job_router
from .room_controller import router as room_router
from .customer_controller import router as customer_router
from .upload_controller import router as upload_router
from .ai_controller import router as ai_router


__all__ = ["auth_router", "job_router", "room_router", "customer_router", "upload_router", "ai_router"]
