"""Prompt templates sent to the LLM provider."""

from datetime import date, timedelta

from diet_planner.domain.health import HealthMetrics
from diet_planner.domain.profile import UserProfile


def meal_items_prompt(description: str) -> str:
    """Prompt that lists the food items of a meal with portion estimates."""
    return (
        "You are a diet expert. Analyze the meal description provided by the user. "
        "Identify the food items present in the meal and estimate their portion "
        "sizes.\n\n"
        f"Meal Description: {description}\n\n"
        "Respond with each food item name and its estimated portion size."
    )


def meal_nutrition_prompt(description: str, locale: str) -> str:
    """Prompt that itemizes a meal into ingredients with calories."""
    return (
        "You are a multilingual AI-powered nutrition expert.\n"
        f"Analyze the meal description provided by the user, written in {locale}, "
        "identify all food items, estimate their portion sizes if possible, and "
        "calculate the total calories and macronutrient breakdown.\n"
        "List individual ingredients and their approximate calorie values. "
        "Use short, plain food names for ingredients "
        "(e.g. 'rice', 'chicken breast').\n\n"
        f"Meal Description: {description}\n\n"
        "Respond in the same language as the meal description. The tone should be "
        "friendly, professional, and health-conscious. "
        "Consider Turkish cuisine and other global dishes."
    )


def food_name_translation_prompt(food_name: str, locale: str) -> str:
    """Prompt that turns a localized food name into its English name."""
    return (
        "You are a multilingual food expert.\n"
        f"Translate the food name below, written in {locale}, into the short "
        "English name a food composition database would use "
        "(e.g. 'chicken breast', 'lentil soup', 'white rice'). "
        "Keep the name unchanged if it is already English.\n\n"
        f"Food Name: {food_name}"
    )


def plan_dates(start_date: date, days: int) -> list[date]:
    """Return the consecutive dates a plan covers."""
    return [start_date + timedelta(days=offset) for offset in range(days)]


def recommendation_prompt(profile: UserProfile, metrics: HealthMetrics) -> str:
    """Prompt that generates the personalized meal plan."""
    days = profile.plan_days()
    schedule = "\n".join(
        f"    - {day.isoformat()} ({day.strftime('%A')})"
        for day in plan_dates(profile.start_date, days)
    )
    allergies = ", ".join(profile.allergen_list()) or "none"
    macros = metrics.macro_percentages
    locale = profile.locale
    return f"""You are an expert multilingual AI-powered diet and nutrition \
assistant. You MUST respond entirely in the user's language: {locale}. Maintain a \
friendly, professional, medically accurate, inclusive, and non-judgmental tone.

User profile:
Name: {profile.name}
Age: {profile.age}
Gender: {profile.gender}
Height: {profile.height} cm
Weight: {profile.weight} kg
Activity Level: {profile.activity_level}
Diet Type: {profile.diet_type}
Allergies/Intolerances: {allergies}
Health Goal: {profile.goal}
Plan Type Requested: {profile.plan_type} ({days} day(s))
Plan Start Date: {profile.start_date.isoformat()}

Pre-computed reference values (Mifflin-St Jeor):
BMI: {metrics.bmi:.1f} ({metrics.bmi_interpretation})
Ideal weight range: {metrics.ideal_weight_range}
BMR: {metrics.bmr:.0f} kcal
TDEE: {metrics.tdee:.0f} kcal (activity factor {metrics.activity_factor})
Daily calorie target: {metrics.recommended_daily_calories:.0f} kcal
Seed macro split: carbs {macros.carbs}%, protein {macros.protein}%, \
fats {macros.fats}%

Tasks:

1. Calculations:
   * Confirm the BMI and the ideal healthy weight range (BMI 18.5-24.9), \
formatted as "XX.X - XX.X kg".
   * Give a brief, gentle interpretation of the BMI. Avoid overly negative terms.
   * Use the daily calorie target above as recommendedDailyCalories. It is the \
authoritative number; do not exceed it for fat loss.
   * Provide an optimal macronutrient breakdown in percentages, starting from the \
seed split and adjusting for goal and activity level.

2. Meal plan:
   * Generate exactly {days} day(s), one for each of these dates:
{schedule}
   * For EACH day include the date (YYYY-MM-DD) and the day of the week in {locale}.
   * Suggest realistic, specific meals for breakfast, lunch and dinner, and \
optionally a morning, afternoon and evening snack (null when omitted). Consider \
Turkish and international cuisine.
   * For EACH meal provide: dish name, brief description, portion size, total \
calories, macronutrients in grams (carbohydrates, protein, fat), ingredients, and \
substitution suggestions (null when none).
   * Include dailyTotalCalories and dailyMacronutrients for each day. The daily \
total should closely match the daily calorie target.
   * Do NOT repeat the same dish anywhere in a multi-day plan.

3. Dietary restrictions and allergies:
   * CRITICAL: strictly respect the diet type '{profile.diet_type}' and avoid ALL \
listed allergens ({allergies}). Check every ingredient.
   * Suggest sensible substitutions where appropriate.

4. Additional recommendations:
   * waterIntakeRecommendation: daily water intake in liters.
   * activityTip, nutrientAdvice, generalTips: optional, null when not useful.

Respond ONLY with the JSON object. All text content must be in {locale}."""
