"""Option catalogues shared by the registration model, validation and UI."""
from typing import Dict, List, Tuple

TSHIRT_SIZES: List[str] = ["XS", "S", "M", "L", "XL", "XXL"]

TSHIRT_SIZE_LABELS: Dict[str, str] = {
    "XS": "Extra Small",
    "S": "Small",
    "M": "Medium",
    "L": "Large",
    "XL": "Extra Large",
    "XXL": "Double Extra Large",
}

GENDERS: List[str] = ["male", "female"]

GENDER_LABELS: Dict[str, str] = {
    "male": "Male",
    "female": "Female",
}

KID_COUNT_OPTIONS: List[int] = [1, 2, 3, 4, 5]

MIN_KID_AGE = 0
MAX_KID_AGE = 18

ENTERTAINMENT_SPORTS: List[Dict[str, str]] = [
    {"value": "badminton", "label": "Badminton", "icon": "🏸"},
    {"value": "table-tennis", "label": "Table Tennis", "icon": "🏓"},
    {"value": "tennis", "label": "Tennis", "icon": "🎾"},
    {"value": "volleyball", "label": "Volleyball", "icon": "🏐"},
    {"value": "padel", "label": "Padel", "icon": "🎾"},
    {"value": "football", "label": "Football", "icon": "⚽"},
    {"value": "basketball", "label": "Basketball", "icon": "🏀"},
]

COMPETITIVE_SPORTS: List[Dict[str, str]] = [
    {"value": "football", "label": "Football", "icon": "⚽"},
    {"value": "basketball", "label": "Basketball", "icon": "🏀"},
    {"value": "padel", "label": "Padel", "icon": "🎾"},
    {"value": "running", "label": "Running", "icon": "🏃"},
]

MAX_COMPETITIVE_SPORTS = 2

EXERCISE_OPTIONS: List[Dict[str, str]] = [
    {"value": "this-week", "label": "This week"},
    {"value": "last-week", "label": "Last week"},
    {"value": "last-month", "label": "Within the last month"},
    {"value": "2-3-months", "label": "2-3 months ago"},
    {"value": "6-months", "label": "3-6 months ago"},
    {"value": "longer", "label": "More than 6 months ago"},
    {"value": "never", "label": "I don't exercise regularly"},
]

MEDICAL_CONDITIONS: List[Dict[str, str]] = [
    {"value": "heart-disease", "label": "Heart Disease/Heart Problems"},
    {"value": "high-blood-pressure", "label": "High Blood Pressure"},
    {"value": "diabetes", "label": "Diabetes"},
    {"value": "asthma", "label": "Asthma/Breathing Problems"},
    {"value": "epilepsy", "label": "Epilepsy/Seizures"},
    {"value": "back-problems", "label": "Back Problems"},
    {"value": "knee-problems", "label": "Knee Problems"},
    {"value": "ankle-problems", "label": "Ankle/Foot Problems"},
    {"value": "pregnancy", "label": "Pregnancy"},
    {"value": "none", "label": "None of the above"},
]

# Physical Activity Readiness Questionnaire
READINESS_QUESTIONS: List[Tuple[str, str]] = [
    (
        "has_medical_conditions",
        "Do you suffer from any medical conditions the Camp Operator & ADSS should be aware of?",
    ),
    (
        "has_heart_condition",
        "Has your doctor ever said that you have a heart condition and that you should "
        "only do physical activity/exercise recommended by a doctor?",
    ),
    (
        "has_chest_pain",
        "Do you feel pain in your chest at any point in time?",
    ),
    (
        "has_balance_issues",
        "Do you lose your balance because of dizziness or do you ever lose consciousness?",
    ),
]

MEDICAL_DETAIL_QUESTIONS: List[Tuple[str, str]] = [
    ("has_other_health_info", "Do you have any other important health-related information?"),
    ("is_taking_medications", "Are you currently taking any medications?"),
    ("has_immediate_health_concerns", "Do you have any immediate health concerns?"),
]

DECLARATION_TEXT = (
    "I declare that I have read, understood, and answered honestly all the questions above. "
    "I have fully disclosed all medical conditions & information as a player at the Event. "
    "I am agreeing to participate in the exercise sessions (which may include aerobic, resistance, "
    "power and stretching exercises) and understand that there may be risks associated with "
    "physical activity. I also understand that ADSS & Atomics Academy will not be liable to any "
    "untoward incident that may arise due to exercise."
)


def option_values(options: List[Dict[str, str]]) -> List[str]:
    """Return the ``value`` of each option in catalogue order."""
    return [option["value"] for option in options]


def option_label(options: List[Dict[str, str]], value: str) -> str:
    """Look up the display label for ``value``; unknown values echo back."""
    for option in options:
        if option["value"] == value:
            return option["label"]
    return value


def size_label(size: str) -> str:
    """Format a T-shirt size as ``"M - Medium"``."""
    label = TSHIRT_SIZE_LABELS.get(size)
    if label is None:
        return size
    return f"{size} - {label}"
