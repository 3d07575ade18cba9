"""Dependency container wiring for the application."""

from collections.abc import Callable
from dataclasses import dataclass

from nosh.adapters.fdc_client import HttpxFdcClient
from nosh.adapters.file_database import Database
from nosh.app_logging import configure_logging
from nosh.config import Settings
from nosh.services.ledger import LedgerService
from nosh.services.search import FoodSearchService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    database: Database
    ledger_service: LedgerService
    search_service: FoodSearchService
    close_resources: Callable[[], None]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    configure_logging(resolved_settings.log_level)
    database = Database(resolved_settings.data_dir)
    fdc_client = HttpxFdcClient.create(
        api_key=resolved_settings.fdc_api_key,
        base_url=resolved_settings.fdc_base_url,
    )
    search_service = FoodSearchService(
        fdc_client=fdc_client,
        page_size=resolved_settings.search_page_size,
    )

    def close_resources() -> None:
        fdc_client.close()

    return AppContainer(
        settings=resolved_settings,
        database=database,
        ledger_service=LedgerService(database),
        search_service=search_service,
        close_resources=close_resources,
    )
