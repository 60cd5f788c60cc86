"""
FastAPI dependency injection container.
"""

from typing import Annotated

from fastapi import Depends, Request

from job_tracker.application.interfaces.sheets import SheetStoreInterface
from job_tracker.application.use_cases.list_job_entries import ListJobEntriesUseCase
from job_tracker.application.use_cases.submit_job_entry import SubmitJobEntryUseCase
from job_tracker.application.use_cases.update_job_entry import UpdateJobEntryUseCase
from job_tracker.config.logging import get_logger
from job_tracker.config.settings import Settings
from job_tracker.infrastructure.repositories.job_entry_repository import (
    SheetJobEntryRepository,
)
from job_tracker.infrastructure.sheets.factory import create_sheet_store

logger = get_logger(__name__)


async def get_settings(request: Request) -> Settings:
    """Get the settings the application was created with."""
    return request.app.state.settings


async def get_sheet_store(
    request: Request, app_settings: Settings = Depends(get_settings)
) -> SheetStoreInterface:
    """Get the shared sheet store, creating it on first use."""
    store = getattr(request.app.state, "sheet_store", None)
    if store is None:
        store = create_sheet_store(app_settings)
        request.app.state.sheet_store = store
    return store


async def get_job_entry_repository(
    store: SheetStoreInterface = Depends(get_sheet_store),
    app_settings: Settings = Depends(get_settings),
) -> SheetJobEntryRepository:
    """Get job entry repository instance."""
    return SheetJobEntryRepository(store, app_settings.GOOGLE_SHEET_NAME)


async def get_submit_use_case(
    repo: SheetJobEntryRepository = Depends(get_job_entry_repository),
    app_settings: Settings = Depends(get_settings),
) -> SubmitJobEntryUseCase:
    return SubmitJobEntryUseCase(
        repo,
        default_prefix=app_settings.DEFAULT_JOB_PREFIX,
        allowed_prefixes=app_settings.JOB_NUMBER_PREFIXES,
    )


async def get_update_use_case(
    repo: SheetJobEntryRepository = Depends(get_job_entry_repository),
) -> UpdateJobEntryUseCase:
    return UpdateJobEntryUseCase(repo)


async def get_list_use_case(
    repo: SheetJobEntryRepository = Depends(get_job_entry_repository),
) -> ListJobEntriesUseCase:
    return ListJobEntriesUseCase(repo)


# Type aliases for cleaner dependency injection
SettingsDep = Annotated[Settings, Depends(get_settings)]
SheetStoreDep = Annotated[SheetStoreInterface, Depends(get_sheet_store)]
SubmitJobEntryDep = Annotated[SubmitJobEntryUseCase, Depends(get_submit_use_case)]
UpdateJobEntryDep = Annotated[UpdateJobEntryUseCase, Depends(get_update_use_case)]
ListJobEntriesDep = Annotated[ListJobEntriesUseCase, Depends(get_list_use_case)]
