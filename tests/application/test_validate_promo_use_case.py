"""Tests for ValidatePromoUseCase."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.application.use_cases.validate_promo import (
    ValidatePromoUseCase,
    parse_promo_type,
)
from src.domain.errors import ExpiredError, NotFoundError, ValidationError
from src.domain.models.promos import (
    FlatLkrDepositBonus,
    PromoCode,
    PromoType,
)

NOW = datetime(2024, 6, 1, tzinfo=timezone.utc)


def _store(promo: PromoCode | None) -> MagicMock:
    store = MagicMock()
    store.find_promo.return_value = promo
    return store


def _promo(expires_at: datetime = NOW + timedelta(days=7)) -> PromoCode:
    return PromoCode(
        code="FLAT500",
        promo_type=PromoType.DEPOSIT_BONUS,
        bonus_rule=FlatLkrDepositBonus(Decimal("500")),
        expires_at=expires_at,
        description="LKR 500 on your deposit",
    )


def test_execute_looks_up_normalized_code() -> None:
    store = _store(_promo())
    use_case = ValidatePromoUseCase(store, logger=MagicMock(), clock=lambda: NOW)

    details = use_case.execute(" flat500 ")

    store.find_promo.assert_called_once_with("FLAT500")
    assert details.bonus_type == "FLAT_LKR_DEPOSIT"
    assert details.bonus_value == Decimal("500")
    assert details.description == "LKR 500 on your deposit"


def test_execute_logs_and_reraises_rejections() -> None:
    logger = MagicMock()
    use_case = ValidatePromoUseCase(
        _store(_promo(expires_at=NOW)), logger=logger, clock=lambda: NOW
    )

    with pytest.raises(ExpiredError):
        use_case.execute("FLAT500")
    logger.info.assert_called_once()


def test_execute_rejects_unknown_code() -> None:
    use_case = ValidatePromoUseCase(
        _store(None), logger=MagicMock(), clock=lambda: NOW
    )

    with pytest.raises(NotFoundError) as excinfo:
        use_case.execute("missing")
    assert excinfo.value.code == "MISSING"


def test_execute_treats_malformed_code_as_unknown() -> None:
    store = _store(None)
    use_case = ValidatePromoUseCase(store, logger=MagicMock(), clock=lambda: NOW)

    with pytest.raises(NotFoundError) as excinfo:
        use_case.execute("bad code")
    assert excinfo.value.code == "BAD CODE"
    store.find_promo.assert_not_called()


def test_execute_requires_a_code() -> None:
    use_case = ValidatePromoUseCase(
        _store(None), logger=MagicMock(), clock=lambda: NOW
    )

    with pytest.raises(ValidationError):
        use_case.execute("   ")


def test_execute_rejects_other_purpose() -> None:
    use_case = ValidatePromoUseCase(
        _store(_promo()), logger=MagicMock(), clock=lambda: NOW
    )

    with pytest.raises(NotFoundError):
        use_case.execute("FLAT500", "purchase_bonus")


def test_parse_promo_type_rejects_unknown_value() -> None:
    assert parse_promo_type(PromoType.DEPOSIT_BONUS) is PromoType.DEPOSIT_BONUS
    with pytest.raises(ValidationError):
        parse_promo_type("REFERRAL")
