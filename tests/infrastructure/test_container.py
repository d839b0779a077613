"""Tests for the composition root."""

from decimal import Decimal
from unittest.mock import MagicMock

from src.infrastructure import container
from src.infrastructure.ledger_repository import SqlAlchemyLedgerRepository
from src.infrastructure.price_repository import SqlAlchemyPriceRepository
from src.infrastructure.settings import GoldNestSettings


def test_builders_share_the_given_database_port() -> None:
    db_port = MagicMock()

    price_repository = container.build_price_repository(db_port)
    ledger_repository = container.build_ledger_repository(db_port)

    assert isinstance(price_repository, SqlAlchemyPriceRepository)
    assert isinstance(ledger_repository, SqlAlchemyLedgerRepository)
    assert price_repository._db_port is db_port
    assert ledger_repository._db_port is db_port


def test_builders_default_to_database_adapter(monkeypatch) -> None:
    adapter = MagicMock()
    monkeypatch.setattr(container, "build_database_adapter", lambda: adapter)

    repository = container.build_settings_repository()

    assert repository._db_port is adapter


def test_deposit_use_case_follows_settings(monkeypatch) -> None:
    monkeypatch.setattr(container, "get_usage_logger", MagicMock)
    settings = GoldNestSettings(
        reject_invalid_promos=False,
        maximum_deposit_lkr=Decimal("5000"),
    )

    use_case = container.build_deposit_use_case(MagicMock(), settings=settings)

    assert use_case._reject_invalid_promos is False
    assert use_case._maximum_lkr == Decimal("5000")


def test_market_summary_use_case_uses_history_window() -> None:
    settings = GoldNestSettings(market_history_days=90)

    use_case = container.build_market_summary_use_case(
        MagicMock(), settings=settings
    )

    assert use_case._history_days == 90


def test_scheduled_jobs_share_one_database_port(monkeypatch) -> None:
    monkeypatch.setattr(container, "get_usage_logger", MagicMock)
    monkeypatch.setattr(container, "get_app_logger", MagicMock)
    db_port = MagicMock()

    auto_invest = container.build_run_auto_investments_use_case(db_port)
    alerts = container.build_check_price_alerts_use_case(
        db_port, settings=GoldNestSettings(market_history_days=30)
    )

    assert auto_invest._plan_store._db_port is db_port
    assert auto_invest._ledger_store._db_port is db_port
    assert auto_invest._notifications._db_port is db_port
    assert alerts._alert_store._db_port is db_port
    assert alerts._market_summary._history_days == 30
