"""Errors raised by the diet planner flows."""


class DietPlannerError(Exception):
    """Base class for diet planner failures."""


class GenerationError(DietPlannerError):
    """The LLM provider returned no usable structured output."""


class EmptyPlanError(GenerationError):
    """The provider output parsed but contains no plan days."""


class NotFoundError(DietPlannerError):
    """A nutrition lookup found no matching food."""

    def __init__(self, food_name: str) -> None:
        super().__init__(f"No nutrition data found for '{food_name}'")
        self.food_name = food_name


class ProfileNotFoundError(DietPlannerError):
    """No profile is stored in the current profile slot."""
