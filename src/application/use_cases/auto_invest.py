"""Use cases to manage and run recurring gold purchases."""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Callable

from src.application.ports.ledger_store import LedgerStorePort
from src.application.ports.price_source import PriceSourcePort
from src.application.ports.schedule_store import (
    AutoInvestPlanStorePort,
    NotificationStorePort,
)
from src.application.ports.settings_store import SettingsStorePort
from src.application.use_cases.market_utils import (
    fetch_latest_gram_price,
    load_fee_schedule,
    utc_now,
)
from src.domain.errors import (
    GoldNestError,
    PriceUnavailableError,
    ValidationError,
)
from src.domain.models.ledger import LedgerEntry, TransactionKind
from src.domain.models.quotes import FeeSchedule
from src.domain.models.schedules import (
    AutoInvestPlan,
    Notification,
    NotificationKind,
)
from src.domain.services.schedules import build_auto_invest_plan, is_plan_due
from src.domain.services.trades import quote_purchase
from src.infrastructure.logging.logger import get_usage_logger
from src.utils.decimal_utils import round_grams, round_lkr


class CreateAutoInvestPlanUseCase:
    """Validate and store a new recurring investment plan."""

    def __init__(
        self,
        plan_store: AutoInvestPlanStorePort,
        logger=None,
    ) -> None:
        self._plan_store = plan_store
        self._logger = logger or get_usage_logger()

    def execute(
        self,
        user_id: str,
        frequency,
        amount_lkr,
        day_of_month=None,
    ) -> AutoInvestPlan:
        """Store the plan and return it with its id.

        Raises:
            ValidationError: Unknown frequency or missing monthly run day.
            BelowMinimumError: Amount below the investment minimum.
        """
        plan = build_auto_invest_plan(
            user_id, frequency, amount_lkr, day_of_month
        )
        saved = self._plan_store.save_plan(plan)
        self._logger.info(
            f"Auto-invest plan created: user={user_id}, id={saved.plan_id}, "
            f"frequency={saved.frequency.value}, amount={saved.amount_lkr}"
        )
        return saved


class SetAutoInvestPlanActiveUseCase:
    """Pause or resume a plan."""

    def __init__(
        self,
        plan_store: AutoInvestPlanStorePort,
        logger=None,
    ) -> None:
        self._plan_store = plan_store
        self._logger = logger or get_usage_logger()

    def execute(self, plan_id: int, is_active: bool) -> None:
        if not self._plan_store.set_plan_active(plan_id, is_active):
            raise ValidationError(f"Auto-invest plan not found: {plan_id}")
        state = "resumed" if is_active else "paused"
        self._logger.info(f"Auto-invest plan {state}: id={plan_id}")


@dataclass(frozen=True)
class AutoInvestRunSummary:
    """Outcome counts of one scheduled run.

    Attributes:
        due: Plans due on the run date.
        succeeded: Plans that bought gold.
        failed: Plans that could not be funded or hit an error.
        skipped: Plans not attempted because no price was available.
    """

    due: int
    succeeded: int
    failed: int
    skipped: int


class RunAutoInvestmentsUseCase:
    """Buy gold for every plan due today at the latest price.

    Each plan is settled in its own ledger transaction; a failing plan
    never stops the others.
    """

    def __init__(
        self,
        plan_store: AutoInvestPlanStorePort,
        price_source: PriceSourcePort,
        ledger_store: LedgerStorePort,
        notifications: NotificationStorePort,
        settings_store: SettingsStorePort | None = None,
        logger=None,
        today: Callable[[], date] | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._plan_store = plan_store
        self._price_source = price_source
        self._ledger_store = ledger_store
        self._notifications = notifications
        self._settings_store = settings_store
        self._logger = logger or get_usage_logger()
        self._today = today or date.today
        self._clock = clock or utc_now

    def execute(self) -> AutoInvestRunSummary:
        run_date = self._today()
        due = [
            plan
            for plan in self._plan_store.list_active_plans()
            if is_plan_due(plan, run_date)
        ]
        self._logger.info(
            f"Auto-invest run for {run_date}: {len(due)} plans due"
        )
        if not due:
            return AutoInvestRunSummary(
                due=0, succeeded=0, failed=0, skipped=0
            )

        try:
            price = fetch_latest_gram_price(self._price_source)
        except PriceUnavailableError as exc:
            self._logger.warning(f"Auto-invest run skipped: {exc}")
            return AutoInvestRunSummary(
                due=len(due), succeeded=0, failed=0, skipped=len(due)
            )
        fees = load_fee_schedule(self._settings_store)

        succeeded = 0
        for plan in due:
            try:
                if self._run_plan(plan, price, fees):
                    succeeded += 1
            except GoldNestError as exc:
                self._logger.error(
                    f"Auto-invest plan {plan.plan_id} failed for "
                    f"user={plan.user_id}: {exc}"
                )
                self._notify(
                    plan,
                    NotificationKind.AUTOPAY_FAILED,
                    "Auto-Invest Failed",
                    f"Your scheduled {plan.frequency.value} investment of "
                    f"{round_lkr(plan.amount_lkr)} LKR could not be "
                    f"processed: {exc}",
                )
        return AutoInvestRunSummary(
            due=len(due),
            succeeded=succeeded,
            failed=len(due) - succeeded,
            skipped=0,
        )

    def _run_plan(
        self,
        plan: AutoInvestPlan,
        price,
        fees: FeeSchedule,
    ) -> bool:
        quote = quote_purchase(plan.amount_lkr, price, fees)
        balance = self._ledger_store.fetch_balance(plan.user_id)
        if balance.cash_balance_lkr < quote.total_cost_lkr:
            self._logger.info(
                f"Auto-invest plan {plan.plan_id} unfunded: "
                f"user={plan.user_id}, required={quote.total_cost_lkr}, "
                f"available={balance.cash_balance_lkr}"
            )
            self._notify(
                plan,
                NotificationKind.AUTOPAY_FAILED,
                "Auto-Invest Failed: Insufficient Funds",
                f"Your scheduled {plan.frequency.value} investment of "
                f"{round_lkr(plan.amount_lkr)} LKR failed due to insufficient "
                f"wallet balance. Required: "
                f"{round_lkr(quote.total_cost_lkr)} LKR.",
            )
            return False

        grams = round_grams(quote.grams)
        entry = LedgerEntry(
            kind=TransactionKind.INVESTMENT,
            amount_lkr=quote.amount_lkr,
            cash_delta_lkr=-quote.total_cost_lkr,
            gold_delta_grams=quote.grams,
            amount_grams=quote.grams,
            price_per_gram_lkr=quote.price_per_gram_lkr,
            fee_lkr=quote.fee_lkr,
            description=(
                f"Automatic {plan.frequency.value} investment: "
                f"{round_lkr(quote.amount_lkr)} LKR for {grams}g gold "
                f"(+ {round_lkr(quote.fee_lkr)} LKR fee)"
            ),
        )
        self._ledger_store.apply_entries(plan.user_id, [entry])
        self._logger.info(
            f"Auto-invest plan {plan.plan_id} executed: user={plan.user_id}, "
            f"amount={quote.amount_lkr}, grams={quote.grams}"
        )
        self._notify(
            plan,
            NotificationKind.AUTOPAY_SUCCESS,
            "Auto-Invest Successful!",
            f"Your scheduled {plan.frequency.value} investment of "
            f"{round_lkr(quote.amount_lkr)} LKR was successful! "
            f"Added {grams}g gold.",
        )
        return True

    def _notify(self, plan, kind, title, message) -> None:
        self._notifications.add_notification(
            Notification(
                user_id=plan.user_id,
                kind=kind,
                title=title,
                message=message,
                created_at=self._clock(),
            )
        )


__all__ = [
    "AutoInvestRunSummary",
    "CreateAutoInvestPlanUseCase",
    "RunAutoInvestmentsUseCase",
    "SetAutoInvestPlanActiveUseCase",
]
