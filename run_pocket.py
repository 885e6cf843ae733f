"""
Command line entry point for the bookkeeping database.

Usage:
    python run_pocket.py init-db
    python run_pocket.py budgets --user 1 [--active]
    python run_pocket.py analytics --user 1 [--period weekly]
    python run_pocket.py currencies --user 1
    python run_pocket.py transactions --user 1 [--type expense] [--page 2]
    python run_pocket.py due [--date 2024-01-31]
"""

import argparse
import sys
from datetime import date
from typing import Any, Sequence

import orjson
from structlog import get_logger

from pocket.application.app import FinanceApplication
from pocket.application.parsing import parse_request_date
from pocket.application.schemas import (
    GetAllTransactionsRequest,
    GetAnalyticsRequest,
)
from pocket.config import AppConfig, get_config
from pocket.domain.errors import FinanceError
from pocket.infrastructure.database import Database, seed_defaults
from pocket.infrastructure.logger import bind_context, setup_logging
from pocket.utils.datetime_helpers import format_date


def setup_arg_parser(config: AppConfig) -> argparse.ArgumentParser:
    """Setup command line argument parser."""
    parser = argparse.ArgumentParser(
        description="Inspect and initialize the bookkeeping database"
    )
    parser.add_argument(
        "--db",
        default=config.database.url,
        help="SQLAlchemy database URL",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser(
        "init-db", help="Create tables and insert default data"
    )

    budgets = commands.add_parser(
        "budgets", help="Budgets with spending reports"
    )
    budgets.add_argument("--user", type=int, required=True)
    budgets.add_argument(
        "--active", action="store_true", help="Only budgets running today"
    )

    analytics = commands.add_parser(
        "analytics", help="Income and spending for the current period"
    )
    analytics.add_argument("--user", type=int, required=True)
    analytics.add_argument(
        "--period",
        default="monthly",
        help="weekly, monthly or yearly",
    )

    currencies = commands.add_parser(
        "currencies", help="Currencies available to a user"
    )
    currencies.add_argument("--user", type=int, required=True)

    transactions = commands.add_parser(
        "transactions", help="Filtered transaction listing"
    )
    transactions.add_argument("--user", type=int, required=True)
    transactions.add_argument("--type", dest="transaction_type")
    transactions.add_argument(
        "--category",
        action="append",
        default=[],
        help="Category id, repeatable or comma separated",
    )
    transactions.add_argument("--from", dest="start_date")
    transactions.add_argument("--to", dest="end_date")
    transactions.add_argument("--page", type=int, default=1)
    transactions.add_argument(
        "--limit", type=int, default=config.finance.default_page_limit
    )

    due = commands.add_parser(
        "due", help="Active recurring transactions due by a date"
    )
    due.add_argument(
        "--date", dest="due_date", help="YYYY-MM-DD, default today"
    )

    return parser


def run_command(
    args: argparse.Namespace, database: Database, config: AppConfig
) -> Any:
    """Execute one command inside a session and return its JSON payload."""
    with database.session_scope() as session:
        if args.command == "init-db":
            return seed_defaults(session)
        if config.database.seed_defaults:
            seed_defaults(session)

        app = FinanceApplication(session, config)

        if args.command == "due":
            today = (
                parse_request_date(args.due_date)
                if args.due_date
                else date.today()
            )
            templates = app.recurring_repo.find_due(today)
            return {
                "date": format_date(today),
                "due": [
                    {
                        "id": int(t.id),
                        "user_id": int(t.user_id),
                        "amount": float(t.amount),
                        "frequency": t.frequency.value,
                        "next_due_date": format_date(t.next_due_date),
                        "description": t.description,
                    }
                    for t in templates
                ],
            }

        if args.command == "budgets":
            response = app.get_budgets.execute(args.user, args.active)
        elif args.command == "analytics":
            response = app.get_analytics.execute(
                args.user, GetAnalyticsRequest(period=args.period)
            )
        elif args.command == "currencies":
            response = app.get_currencies.execute(args.user)
        elif args.command == "transactions":
            response = app.get_all_transactions.execute(
                args.user,
                GetAllTransactionsRequest(
                    type=args.transaction_type,
                    category_ids=args.category,
                    start_date=args.start_date,
                    end_date=args.end_date,
                    page=args.page,
                    limit=args.limit,
                ),
            )
        else:
            raise ValueError(f"Unknown command: {args.command}")

        return response.model_dump()


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point."""
    config = get_config()
    setup_logging(config.logger_adapter)
    logger = get_logger("run_pocket.py")

    parser = setup_arg_parser(config)
    args = parser.parse_args(argv)

    if getattr(args, "user", None) is not None:
        bind_context(user_id=args.user)

    database = Database(args.db, echo=config.database.echo)
    try:
        payload = run_command(args, database, config)
    except FinanceError as e:
        logger.error(f"{type(e).__name__}: {e}")
        return 2
    except Exception:
        logger.exception(f"Command '{args.command}' failed")
        return 1
    finally:
        database.close()

    sys.stdout.write(
        orjson.dumps(payload, option=orjson.OPT_INDENT_2).decode("utf-8")
    )
    sys.stdout.write("\n")
    logger.info(f"Command '{args.command}' completed")
    return 0


if __name__ == "__main__":
    sys.exit(main())
