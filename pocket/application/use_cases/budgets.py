"""
Budget use cases.

Listing budgets always recomputes each budget's spending report.
"""

from pocket.domain.services import (
    BudgetReportService,
    BudgetService,
    CategoryService,
    CurrencyService,
)
from pocket.domain.value_objects import (
    BudgetID,
    CategoryID,
    CurrencyID,
    Money,
    UserID,
)

from pocket.application.parsing import parse_request_date
from pocket.application.schemas import (
    BudgetReportResponse,
    BudgetResponse,
    BudgetsResponse,
    CreateBudgetRequest,
    UpdateBudgetRequest,
)

from .categories import find_category


class CreateBudgetUseCase:
    def __init__(
        self,
        budget_service: BudgetService,
        currency_service: CurrencyService,
        category_service: CategoryService,
    ):
        self.budget_service = budget_service
        self.currency_service = currency_service
        self.category_service = category_service

    def execute(
        self, user_id: int, request: CreateBudgetRequest
    ) -> BudgetResponse:
        owner = UserID(user_id)
        start_date = parse_request_date(request.start_date, "start_date")

        if request.currency_id is not None:
            currency_id = CurrencyID(request.currency_id)
        else:
            currency_id = self.currency_service.get_default_currency(owner).id

        budget = self.budget_service.create_budget(
            owner,
            CategoryID(request.category_id),
            Money(request.amount, currency_id),
            request.period,
            start_date,
        )
        return BudgetResponse.from_entity(
            budget, find_category(self.category_service, budget.category_id)
        )


class GetBudgetsUseCase:
    """List a user's budgets with spending reports."""

    def __init__(
        self,
        budget_service: BudgetService,
        report_service: BudgetReportService,
        category_service: CategoryService,
    ):
        self.budget_service = budget_service
        self.report_service = report_service
        self.category_service = category_service

    def execute(
        self, user_id: int, active_only: bool = False
    ) -> BudgetsResponse:
        owner = UserID(user_id)
        if active_only:
            budgets = self.budget_service.get_active_budgets_by_user(owner)
        else:
            budgets = self.budget_service.get_budgets_by_user(owner)

        reports = self.report_service.build_reports(budgets)
        return BudgetsResponse(
            budgets=[
                BudgetReportResponse.from_report(
                    report,
                    find_category(
                        self.category_service, report.budget.category_id
                    ),
                )
                for report in reports
            ]
        )


class UpdateBudgetUseCase:
    """Change a budget's cap, period and start; the currency is kept."""

    def __init__(
        self,
        budget_service: BudgetService,
        category_service: CategoryService,
    ):
        self.budget_service = budget_service
        self.category_service = category_service

    def execute(
        self, user_id: int, budget_id: int, request: UpdateBudgetRequest
    ) -> BudgetResponse:
        start_date = parse_request_date(request.start_date, "start_date")
        existing = self.budget_service.get_budget_by_id(BudgetID(budget_id))

        budget = self.budget_service.update_budget(
            BudgetID(budget_id),
            UserID(user_id),
            Money(request.amount, existing.amount.currency),
            request.period,
            start_date,
        )
        return BudgetResponse.from_entity(
            budget, find_category(self.category_service, budget.category_id)
        )


class DeleteBudgetUseCase:
    def __init__(self, budget_service: BudgetService):
        self.budget_service = budget_service

    def execute(self, user_id: int, budget_id: int) -> None:
        self.budget_service.delete_budget(BudgetID(budget_id), UserID(user_id))
