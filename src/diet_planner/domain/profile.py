"""User profile model."""

from datetime import date
from typing import Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

DEFAULT_LOCALE = "tr-TR"

Gender = Literal["male", "female"]
ActivityLevel = Literal[
    "sedentary", "lightly-active", "moderately-active", "very-active"
]
DietType = Literal[
    "omnivore",
    "vegetarian",
    "vegan",
    "pescatarian",
    "halal",
    "kosher",
    "gluten-free",
    "diabetic-friendly",
]
Goal = Literal["lose-fat", "maintain", "gain-muscle"]
PlanType = Literal["daily", "weekly"]

PLAN_DAYS: dict[str, int] = {"daily": 1, "weekly": 7}


class UserProfile(BaseModel):
    """Health profile submitted through the profile form."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )

    name: str = Field(min_length=2, max_length=50)
    age: int = Field(ge=1, le=120)
    gender: Gender
    height: int = Field(ge=50, le=280, description="Height in centimeters.")
    weight: float = Field(ge=1, le=500, description="Weight in kilograms.")
    activity_level: ActivityLevel
    diet_type: DietType
    allergies: str = Field(default="", max_length=500)
    goal: Goal
    plan_type: PlanType
    start_date: date
    locale: str = Field(
        default=DEFAULT_LOCALE,
        min_length=2,
        validation_alias=AliasChoices(
            "locale", "browserLanguage", "browser_language"
        ),
    )

    @field_validator(
        "gender", "activity_level", "diet_type", "goal", "plan_type", mode="before"
    )
    @classmethod
    def _normalize_choice(cls, value: object) -> object:
        # Stored profiles use "lose fat" / "very active".
        if isinstance(value, str):
            return "-".join(value.strip().lower().split())
        return value

    @field_validator("allergies", mode="before")
    @classmethod
    def _allergies_default(cls, value: object) -> object:
        return "" if value is None else value

    def allergen_list(self) -> list[str]:
        """Return the comma-separated allergies as a clean list."""
        return [chunk.strip() for chunk in self.allergies.split(",") if chunk.strip()]

    def plan_days(self) -> int:
        """Return how many days the requested plan should cover."""
        return PLAN_DAYS[self.plan_type]

    def to_storage(self) -> dict[str, object]:
        """Return the JSON-ready payload written to the profile slot."""
        return self.model_dump(mode="json", by_alias=True)
