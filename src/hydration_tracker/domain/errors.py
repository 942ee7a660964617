"""Errors raised by hydration services and adapters."""


class HydrationError(Exception):
    """Base class for hydration tracker errors."""


class StoreUnavailable(HydrationError):  # noqa: N818
    """Raised when the ledger or preference store cannot be read or written."""


class InvalidGoal(HydrationError, ValueError):  # noqa: N818
    """Raised when a daily goal is not a positive number of ounces."""

    def __init__(self, goal_oz: int) -> None:
        super().__init__(f"Daily goal must be positive, got {goal_oz} oz")
        self.goal_oz = goal_oz


class InvalidCupSize(HydrationError, ValueError):  # noqa: N818
    """Raised when a cup size is not a positive number of ounces."""

    def __init__(self, cup_size_oz: int) -> None:
        super().__init__(f"Cup size must be positive, got {cup_size_oz} oz")
        self.cup_size_oz = cup_size_oz
