from datetime import date
from typing import Callable, List

from structlog import get_logger

from pocket.domain.entities import Budget, BudgetPeriod
from pocket.domain.errors import NotFoundError
from pocket.domain.repositories import BudgetRepository, CategoryRepository
from pocket.domain.value_objects import BudgetID, CategoryID, Money, UserID

from .access import ensure_can_use, ensure_owner

logger = get_logger(__name__)


class BudgetService:
    """Budget lifecycle and ownership rules."""

    def __init__(
        self,
        budget_repo: BudgetRepository,
        category_repo: CategoryRepository,
        clock: Callable[[], date] = date.today,
    ):
        self.budget_repo = budget_repo
        self.category_repo = category_repo
        self.clock = clock

    def create_budget(
        self,
        user_id: UserID,
        category_id: CategoryID,
        amount: Money,
        period: BudgetPeriod | str,
        start_date: date,
    ) -> Budget:
        """
        Cap spending in a category for one period.

        Raises:
            NotFoundError: Category does not exist.
            ForbiddenError: Category belongs to another user.
            ValidationError: Period is not weekly, monthly or yearly.
        """
        category = self.category_repo.find_by_id(category_id)
        if category is None:
            raise NotFoundError(f"Category {category_id} not found")
        ensure_can_use(category, user_id, "category")

        budget = Budget.create(user_id, category_id, amount, period, start_date)
        self.budget_repo.save(budget)
        logger.info(
            f"Budget {budget.id} created for user {user_id}: "
            f"{budget.period.value} {budget.start_date} - {budget.end_date}"
        )
        return budget

    def get_budgets_by_user(self, user_id: UserID) -> List[Budget]:
        return self.budget_repo.find_by_user_id(user_id)

    def get_active_budgets_by_user(self, user_id: UserID) -> List[Budget]:
        return self.budget_repo.find_active_by_user_id(user_id, self.clock())

    def get_budget_by_id(self, budget_id: BudgetID) -> Budget:
        budget = self.budget_repo.find_by_id(budget_id)
        if budget is None:
            raise NotFoundError(f"Budget {budget_id} not found")
        return budget

    def update_budget(
        self,
        budget_id: BudgetID,
        user_id: UserID,
        amount: Money,
        period: BudgetPeriod | str,
        start_date: date,
    ) -> Budget:
        """
        Change cap, period and start of a budget the user owns.

        The end date is recomputed from the new period and start date.

        Raises:
            NotFoundError: Budget does not exist.
            ForbiddenError: Budget belongs to another user.
            ValidationError: Currency change or unknown period.
        """
        budget = self.get_budget_by_id(budget_id)
        ensure_owner(budget.user_id, user_id, "budget")

        budget.update_amount(amount)
        budget.update_period(period)
        budget.update_start_date(start_date)

        self.budget_repo.save(budget)
        logger.info(f"Budget {budget_id} updated by user {user_id}")
        return budget

    def delete_budget(self, budget_id: BudgetID, user_id: UserID) -> None:
        budget = self.get_budget_by_id(budget_id)
        ensure_owner(budget.user_id, user_id, "budget")

        self.budget_repo.delete(budget_id)
        logger.info(f"Budget {budget_id} deleted by user {user_id}")
