"""CLI adapter for recurring investments and price alerts.

``auto-invest`` and ``price-alerts`` are meant to run from a scheduler;
the other commands let operators manage plans and alerts by hand.
"""

import argparse

from src.application.use_cases.auto_invest import (
    CreateAutoInvestPlanUseCase,
    SetAutoInvestPlanActiveUseCase,
)
from src.application.use_cases.price_alerts import CreatePriceAlertUseCase
from src.domain.errors import GoldNestError
from src.infrastructure.container import (
    build_auto_invest_plan_repository,
    build_check_price_alerts_use_case,
    build_price_alert_repository,
    build_run_auto_investments_use_case,
)
from src.infrastructure.logging.logger import get_app_logger


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("auto-invest", help="Run the plans due today")
    commands.add_parser("price-alerts", help="Check alerts and market moves")

    add_plan = commands.add_parser("add-plan", help="Create a recurring plan")
    add_plan.add_argument("user_id")
    add_plan.add_argument("frequency", choices=["daily", "weekly", "monthly"])
    add_plan.add_argument("amount", help="LKR invested per run")
    add_plan.add_argument("--day-of-month", default=None)

    toggle = commands.add_parser("set-plan", help="Pause or resume a plan")
    toggle.add_argument("plan_id", type=int)
    toggle.add_argument("state", choices=["active", "paused"])

    add_alert = commands.add_parser("add-alert", help="Create a price alert")
    add_alert.add_argument("user_id")
    add_alert.add_argument("condition", choices=["below", "above"])
    add_alert.add_argument("target", help="Target LKR price per gram")
    return parser


def _run(args, logger) -> str:
    if args.command == "auto-invest":
        summary = build_run_auto_investments_use_case().execute()
        return (
            f"Auto-invest: {summary.due} due, {summary.succeeded} succeeded, "
            f"{summary.failed} failed, {summary.skipped} skipped."
        )
    if args.command == "price-alerts":
        result = build_check_price_alerts_use_case().execute()
        market = " Market alert sent." if result.market_alert_sent else ""
        return (
            f"Price {result.price_per_gram_lkr} LKR/g: "
            f"{len(result.triggered)} alerts triggered.{market}"
        )
    if args.command == "add-plan":
        plan = CreateAutoInvestPlanUseCase(
            build_auto_invest_plan_repository(), logger=logger
        ).execute(args.user_id, args.frequency, args.amount, args.day_of_month)
        return f"Auto-invest plan {plan.plan_id} created."
    if args.command == "set-plan":
        SetAutoInvestPlanActiveUseCase(
            build_auto_invest_plan_repository(), logger=logger
        ).execute(args.plan_id, args.state == "active")
        return f"Auto-invest plan {args.plan_id} {args.state}."
    alert = CreatePriceAlertUseCase(
        build_price_alert_repository(), logger=logger
    ).execute(args.user_id, args.target, args.condition)
    return f"Price alert {alert.alert_id} created."


def main(argv: list[str] | None = None) -> int:
    """Run one command and print its outcome."""
    args = _build_parser().parse_args(argv)
    logger = get_app_logger()
    try:
        message = _run(args, logger)
    except GoldNestError as exc:
        logger.error(str(exc))
        print(f"{args.command} failed: {exc}")
        return 1
    print(message)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
