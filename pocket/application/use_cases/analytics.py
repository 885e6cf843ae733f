"""
Period analytics: income and spending totals for the current
week, month or year.
"""

from datetime import date
from typing import Callable

from pocket.domain.services import (
    TransactionService,
    period_window,
    summarize_period,
)
from pocket.domain.value_objects import UserID

from pocket.application.schemas import AnalyticsResponse, GetAnalyticsRequest


class GetAnalyticsUseCase:
    """
    Aggregate a user's transactions over the window containing today.

    ``weekly`` and ``yearly`` select those windows; any other period is
    treated as monthly. The response echoes the period as requested.
    """

    def __init__(
        self,
        transaction_service: TransactionService,
        clock: Callable[[], date] = date.today,
    ):
        self.transaction_service = transaction_service
        self.clock = clock

    def execute(
        self, user_id: int, request: GetAnalyticsRequest
    ) -> AnalyticsResponse:
        start, end = period_window(
            request.period.strip().lower(), self.clock()
        )
        service = self.transaction_service
        transactions = service.get_transactions_by_user_and_date_range(
            UserID(user_id), start, end
        )
        totals = summarize_period(start, end, transactions)
        return AnalyticsResponse.from_totals(request.period, totals)
