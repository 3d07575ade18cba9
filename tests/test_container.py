"""Tests for container wiring."""

from datetime import date

from nosh.config import Settings
from nosh.containers import build_container


def test_build_container_creates_services(settings: Settings) -> None:
    container = build_container(settings)

    assert container.database.root == settings.data_dir
    assert container.search_service.page_size == settings.search_page_size
    assert container.ledger_service.journal(date(2024, 7, 1)) is not None
    container.close_resources()
