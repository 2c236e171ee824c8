"""Deterministic health calculations (BMI, BMR, TDEE, calorie target)."""

from diet_planner.domain.health import HealthMetrics, MacroPercentages
from diet_planner.domain.profile import UserProfile

HEALTHY_BMI_MIN = 18.5
HEALTHY_BMI_MAX = 24.9
MIN_DAILY_CALORIES = 1200.0
FAT_LOSS_DEFICIT = 500.0
MUSCLE_GAIN_SURPLUS = 350.0

ACTIVITY_FACTORS: dict[str, float] = {
    "sedentary": 1.2,
    "lightly-active": 1.375,
    "moderately-active": 1.55,
    "very-active": 1.725,
}
DEFAULT_ACTIVITY_FACTOR = 1.2

MACRO_SEEDS: dict[str, MacroPercentages] = {
    "maintain": MacroPercentages(carbs=45, protein=25, fats=30),
    "gain-muscle": MacroPercentages(carbs=45, protein=30, fats=25),
    "lose-fat": MacroPercentages(carbs=40, protein=30, fats=30),
}


def compute(profile: UserProfile) -> HealthMetrics:
    """Compute the seed metrics for a profile."""
    height_m = profile.height / 100
    bmi = profile.weight / (height_m * height_m)
    ideal_min, ideal_max = ideal_weight_bounds(profile.height)
    bmr = basal_metabolic_rate(
        gender=profile.gender,
        weight=profile.weight,
        height=profile.height,
        age=profile.age,
    )
    factor = activity_factor(profile.activity_level)
    tdee = bmr * factor
    return HealthMetrics(
        bmi=bmi,
        ideal_weight_min=ideal_min,
        ideal_weight_max=ideal_max,
        ideal_weight_range=f"{ideal_min:.1f} - {ideal_max:.1f} kg",
        bmi_interpretation=interpret_bmi(bmi),
        bmr=bmr,
        activity_factor=factor,
        tdee=tdee,
        recommended_daily_calories=target_calories(tdee, profile.goal),
        macro_percentages=MACRO_SEEDS.get(profile.goal, MACRO_SEEDS["maintain"]),
    )


def ideal_weight_bounds(height_cm: float) -> tuple[float, float]:
    """Return the healthy weight range in kg for a height."""
    height_m = height_cm / 100
    squared = height_m * height_m
    return HEALTHY_BMI_MIN * squared, HEALTHY_BMI_MAX * squared


def interpret_bmi(bmi: float) -> str:
    """Return a coarse BMI category label."""
    if bmi < HEALTHY_BMI_MIN:
        return "Underweight"
    if bmi < 25:
        return "Healthy weight"
    if bmi < 30:
        return "Overweight"
    return "Obese"


def basal_metabolic_rate(
    *, gender: str, weight: float, height: float, age: int
) -> float:
    """Mifflin-St Jeor basal metabolic rate in kcal/day."""
    base = 10 * weight + 6.25 * height - 5 * age
    if gender == "male":
        return base + 5
    return base - 161


def activity_factor(activity_level: str) -> float:
    """Return the TDEE multiplier, falling back to sedentary."""
    return ACTIVITY_FACTORS.get(activity_level, DEFAULT_ACTIVITY_FACTOR)


def target_calories(tdee: float, goal: str) -> float:
    """Adjust maintenance calories for the user's goal."""
    if goal == "lose-fat":
        return max(MIN_DAILY_CALORIES, tdee - FAT_LOSS_DEFICIT)
    if goal == "gain-muscle":
        return tdee + MUSCLE_GAIN_SURPLUS
    return tdee
