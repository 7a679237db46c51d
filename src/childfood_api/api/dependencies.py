"""FastAPI dependency injection factories."""

import logging
from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from childfood_api.core.config import Settings, get_settings
from childfood_api.db.memory import InMemoryKeyValueStore
from childfood_api.db.mongo import MongoDB
from childfood_api.db.ports import KeyValueStore
from childfood_api.db.unit_of_work import UnitOfWork
from childfood_api.services.analysis import AnalysisEngine, get_analysis_engine
from childfood_api.services.history import HistoryService
from childfood_api.services.meal_plans import MealPlanService
from childfood_api.services.profiles import ProfileService
from childfood_api.services.report import ReportRenderer
from childfood_api.services.text_extraction import (
    TextExtractionService,
    get_text_extraction_service,
)

logger = logging.getLogger(__name__)

# Used for profiles and meal plans while MongoDB is unavailable
_local_store = InMemoryKeyValueStore()


# Type aliases for cleaner route signatures
SettingsDep = Annotated[Settings, Depends(get_settings)]


def get_uow() -> UnitOfWork | None:
    """
    Get Unit of Work instance.

    Returns:
        UnitOfWork instance, or None when MongoDB is not connected
    """
    if not MongoDB.is_connected():
        return None
    return UnitOfWork(MongoDB.get_database())


# Type alias for UoW dependency
UoWDep = Annotated[UnitOfWork | None, Depends(get_uow)]


def get_key_value_store(uow: UoWDep) -> KeyValueStore:
    """
    Get the store backing profiles and meal plans.

    Falls back to a process-local store when MongoDB is not connected.
    """
    if uow is None:
        logger.warning("MongoDB not connected. Using in-memory profile storage.")
        return _local_store
    return uow.key_value


@lru_cache(maxsize=1)
def get_engine() -> AnalysisEngine:
    """Get the shared analysis engine (stateless between requests)."""
    return get_analysis_engine()


def get_history_service(uow: UoWDep) -> HistoryService:
    """
    Get HistoryService instance.

    Args:
        uow: Injected Unit of Work

    Returns:
        HistoryService instance (inert when MongoDB is not connected)
    """
    return HistoryService(uow.analyses if uow is not None else None)


def get_profile_service(
    store: KeyValueStore = Depends(get_key_value_store),
) -> ProfileService:
    """Get ProfileService instance."""
    return ProfileService(store)


def get_meal_plan_service(
    store: KeyValueStore = Depends(get_key_value_store),
) -> MealPlanService:
    """Get MealPlanService instance."""
    return MealPlanService(store)


def get_report_renderer() -> ReportRenderer:
    return ReportRenderer()


# Type aliases for service dependencies
EngineDep = Annotated[AnalysisEngine, Depends(get_engine)]
TextExtractionDep = Annotated[TextExtractionService, Depends(get_text_extraction_service)]
HistoryServiceDep = Annotated[HistoryService, Depends(get_history_service)]
ProfileServiceDep = Annotated[ProfileService, Depends(get_profile_service)]
MealPlanServiceDep = Annotated[MealPlanService, Depends(get_meal_plan_service)]
ReportRendererDep = Annotated[ReportRenderer, Depends(get_report_renderer)]
