from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .gateway_provider import GatewayProvider
from .analysis_provider import AnalysisProvider
from .auth_provider import AuthProvider
from .job_provider import JobProvider
from .room_provider import RoomProvider
from .customer_provider import CustomerProvider


__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "GatewayProvider",
    "AnalysisProvider",
    "AuthProvider",
    "JobProvider",
    "RoomProvider",
    "CustomerProvider",
]
