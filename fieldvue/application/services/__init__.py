from .room_analysis_service import AnalysisReport, KeyedLock, RoomAnalysisService
from .analysis_queue import AnalysisJob, AnalysisQueue

__all__ = ["AnalysisReport", "KeyedLock", "RoomAnalysisService", "AnalysisJob", "AnalysisQueue"]
