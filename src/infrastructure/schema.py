"""DDL for the platform tables."""

from src.application.ports.database import DatabaseEnginePort

CREATE_GOLD_PRICES_SQL = """
CREATE TABLE IF NOT EXISTS gold_prices (
    price_date DATE PRIMARY KEY,
    price_per_troy_ounce_lkr NUMERIC(18, 4) NOT NULL
)
"""

CREATE_PROMO_CODES_SQL = """
CREATE TABLE IF NOT EXISTS promo_codes (
    code TEXT PRIMARY KEY,
    promo_type TEXT NOT NULL,
    bonus_type TEXT NOT NULL,
    bonus_value NUMERIC(18, 4) NOT NULL,
    expires_at TIMESTAMP WITH TIME ZONE NOT NULL,
    description TEXT NOT NULL DEFAULT '',
    is_active BOOLEAN NOT NULL DEFAULT TRUE,
    total_usage_limit INTEGER,
    times_used INTEGER NOT NULL DEFAULT 0
)
"""

CREATE_WALLETS_SQL = """
CREATE TABLE IF NOT EXISTS wallets (
    user_id TEXT PRIMARY KEY,
    cash_balance_lkr NUMERIC(18, 4) NOT NULL DEFAULT 0,
    gold_balance_grams NUMERIC(18, 6) NOT NULL DEFAULT 0
)
"""

CREATE_LEDGER_TRANSACTIONS_SQL = """
CREATE TABLE IF NOT EXISTS ledger_transactions (
    transaction_id INTEGER GENERATED BY DEFAULT AS IDENTITY PRIMARY KEY,
    user_id TEXT NOT NULL,
    kind TEXT NOT NULL,
    amount_lkr NUMERIC(18, 4) NOT NULL,
    amount_grams NUMERIC(18, 6),
    cash_delta_lkr NUMERIC(18, 4) NOT NULL DEFAULT 0,
    gold_delta_grams NUMERIC(18, 6) NOT NULL DEFAULT 0,
    price_per_gram_lkr NUMERIC(18, 4),
    fee_lkr NUMERIC(18, 4),
    description TEXT NOT NULL DEFAULT '',
    status TEXT NOT NULL,
    created_at TIMESTAMP WITH TIME ZONE NOT NULL
)
"""

CREATE_PLATFORM_SETTINGS_SQL = """
CREATE TABLE IF NOT EXISTS platform_settings (
    setting_key TEXT PRIMARY KEY,
    setting_value TEXT NOT NULL
)
"""

CREATE_ADMIN_ACTION_LOGS_SQL = """
CREATE TABLE IF NOT EXISTS admin_action_logs (
    entry_id INTEGER GENERATED BY DEFAULT AS IDENTITY PRIMARY KEY,
    admin_name TEXT NOT NULL,
    action_type TEXT NOT NULL,
    payload TEXT NOT NULL,
    created_at TIMESTAMP WITH TIME ZONE NOT NULL,
    is_undone BOOLEAN NOT NULL DEFAULT FALSE,
    undone_by TEXT,
    undone_at TIMESTAMP WITH TIME ZONE
)
"""

CREATE_AUTO_INVEST_PLANS_SQL = """
CREATE TABLE IF NOT EXISTS auto_invest_plans (
    plan_id INTEGER GENERATED BY DEFAULT AS IDENTITY PRIMARY KEY,
    user_id TEXT NOT NULL,
    frequency TEXT NOT NULL,
    amount_lkr NUMERIC(18, 4) NOT NULL,
    day_of_month INTEGER CHECK (day_of_month BETWEEN 1 AND 28),
    is_active BOOLEAN NOT NULL DEFAULT TRUE
)
"""

CREATE_PRICE_ALERTS_SQL = """
CREATE TABLE IF NOT EXISTS price_alerts (
    alert_id INTEGER GENERATED BY DEFAULT AS IDENTITY PRIMARY KEY,
    user_id TEXT NOT NULL,
    target_price_per_gram_lkr NUMERIC(18, 4) NOT NULL,
    condition TEXT NOT NULL,
    is_active BOOLEAN NOT NULL DEFAULT TRUE
)
"""

CREATE_NOTIFICATIONS_SQL = """
CREATE TABLE IF NOT EXISTS notifications (
    notification_id INTEGER GENERATED BY DEFAULT AS IDENTITY PRIMARY KEY,
    user_id TEXT,
    kind TEXT NOT NULL,
    title TEXT NOT NULL,
    message TEXT NOT NULL,
    created_at TIMESTAMP WITH TIME ZONE NOT NULL,
    is_read BOOLEAN NOT NULL DEFAULT FALSE
)
"""

SCHEMA_STATEMENTS = (
    CREATE_GOLD_PRICES_SQL,
    CREATE_PROMO_CODES_SQL,
    CREATE_WALLETS_SQL,
    CREATE_LEDGER_TRANSACTIONS_SQL,
    CREATE_PLATFORM_SETTINGS_SQL,
    CREATE_ADMIN_ACTION_LOGS_SQL,
    CREATE_AUTO_INVEST_PLANS_SQL,
    CREATE_PRICE_ALERTS_SQL,
    CREATE_NOTIFICATIONS_SQL,
)


def ensure_schema(db_port: DatabaseEnginePort) -> None:
    """Create the platform tables when they do not exist."""
    engine = db_port.get_engine()
    with engine.begin() as conn:
        for statement in SCHEMA_STATEMENTS:
            conn.exec_driver_sql(statement)


__all__ = ["SCHEMA_STATEMENTS", "ensure_schema"]
