"""Built-in category master data.

Numeric ids are referenced by stored transactions and subscriptions. Once an
id has been assigned it must never change or be reused; new categories take an
id above the current maximum of their range (expense < 100, income > 100).
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from kakeibo.domain.statistics.entities import Category
from kakeibo.domain.statistics.value_objects import TransactionType


class CategoryCatalog:
    """Immutable, id-indexed collection of categories."""

    def __init__(self, categories: Iterable[Category]):
        self._categories = tuple(categories)
        self._by_id: dict[int, Category] = {}
        for category in self._categories:
            if category.id in self._by_id:
                msg = f"Duplicate category id: {category.id}"
                raise ValueError(msg)
            self._by_id[category.id] = category

    def __iter__(self) -> Iterator[Category]:
        return iter(self._categories)

    def __len__(self) -> int:
        return len(self._categories)

    def __contains__(self, category_id: object) -> bool:
        return category_id in self._by_id

    def get(self, category_id: int) -> Category | None:
        return self._by_id.get(category_id)

    def lookup(self, category_id: int) -> str | None:
        """Resolve a display name; usable directly as a CategoryLookup."""
        category = self._by_id.get(category_id)
        return category.name if category else None

    def by_type(self, transaction_type: TransactionType) -> list[Category]:
        return [c for c in self._categories if c.type is transaction_type]


EXPENSE_CATEGORIES: tuple[Category, ...] = (
    Category(
        id=1,
        name="Rent, Utilities & Phone",
        type=TransactionType.EXPENSE,
        color="#D35400",
        description="Rent, electricity, gas, water, internet, mobile",
    ),
    Category(
        id=2,
        name="Housing",
        type=TransactionType.EXPENSE,
        color="#4ECDC4",
        description="Housing related costs",
    ),
    Category(
        id=3,
        name="Food",
        type=TransactionType.EXPENSE,
        color="#FF6B6B",
        description="Groceries, eating out",
    ),
    Category(
        id=4,
        name="Transportation",
        type=TransactionType.EXPENSE,
        color="#3498DB",
        description="Train, bus, taxi, fuel",
    ),
    Category(
        id=5,
        name="Work & Business",
        type=TransactionType.EXPENSE,
        color="#8E44AD",
        description="Development costs, tools, business services",
    ),
    Category(
        id=6,
        name="System Fees",
        type=TransactionType.EXPENSE,
        color="#9B59B6",
        description="Service usage fees, subscriptions",
    ),
    Category(
        id=8,
        name="Books",
        type=TransactionType.EXPENSE,
        color="#1E8BC3",
        description="Books, e-books, magazines",
    ),
    Category(
        id=10,
        name="Health & Fitness",
        type=TransactionType.EXPENSE,
        color="#96CEB4",
        description="Medical costs, medicine, gym, sports",
    ),
    Category(
        id=11,
        name="Shopping",
        type=TransactionType.EXPENSE,
        color="#F39C12",
        description="Clothing, daily necessities, goods",
    ),
    Category(
        id=18,
        name="Entertainment",
        type=TransactionType.EXPENSE,
        color="#E67E22",
        description="Movies, games, music, hobbies",
    ),
    Category(
        id=12,
        name="Other",
        type=TransactionType.EXPENSE,
        color="#FFEAA7",
        description="Other expenses",
    ),
)

INCOME_CATEGORIES: tuple[Category, ...] = (
    Category(
        id=101,
        name="Salary",
        type=TransactionType.INCOME,
        color="#10b981",
        description="Monthly, daily or hourly wages",
    ),
    Category(
        id=102,
        name="Bonus",
        type=TransactionType.INCOME,
        color="#059669",
        description="Bonuses, incentives and other one-off income",
    ),
    Category(
        id=103,
        name="Side Business",
        type=TransactionType.INCOME,
        color="#34d399",
        description="Freelance and side-job income",
    ),
    Category(
        id=104,
        name="Investment Returns",
        type=TransactionType.INCOME,
        color="#6ee7b7",
        description="Dividends, rental income and other investment returns",
    ),
    Category(
        id=105,
        name="Other",
        type=TransactionType.INCOME,
        color="#a7f3d0",
        description="Other income",
    ),
)

DEFAULT_CATEGORY_CATALOG = CategoryCatalog((*EXPENSE_CATEGORIES, *INCOME_CATEGORIES))
