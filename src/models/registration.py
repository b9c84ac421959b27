"""Registration data model for the Sports & Family Day form."""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from src.models.choices import (
    COMPETITIVE_SPORTS,
    ENTERTAINMENT_SPORTS,
    MAX_COMPETITIVE_SPORTS,
    MEDICAL_CONDITIONS,
    option_values,
)

# Attribute name -> payload key, in the order the endpoint documents them.
PAYLOAD_FIELDS = [
    ("full_name", "fullName"),
    ("email", "email"),
    ("phone", "phone"),
    ("department", "department"),
    ("gender", "gender"),
    ("tshirt_size", "parentTshirtSize"),
    ("bringing_kids", "bringingKids"),
    ("number_of_kids", "numberOfKids"),
    ("kids", "kids"),
    ("entertainment_sports", "entertainmentSports"),
    ("interested_in_competing", "interestedInCompeting"),
    ("competitive_sports", "competitiveSports"),
    ("last_exercise", "lastExercise"),
    ("medical_conditions", "medicalConditions"),
    ("current_medications", "currentMedications"),
    ("previous_injuries", "previousInjuries"),
    ("physical_limitations", "physicalLimitations"),
    ("health_concerns", "healthConcerns"),
    ("has_medical_conditions", "hasMedicalConditions"),
    ("has_heart_condition", "hasHeartCondition"),
    ("has_chest_pain", "hasChestPain"),
    ("has_balance_issues", "hasBalanceIssues"),
    ("has_other_health_info", "hasOtherHealthInfo"),
    ("is_taking_medications", "isTakingMedications"),
    ("has_immediate_health_concerns", "hasImmediateHealthConcerns"),
    ("guardian_name", "guardianName"),
    ("guardian_signature", "guardianSignature"),
    ("emergency_contact_name", "emergencyContactName"),
    ("emergency_contact_phone", "emergencyContactPhone"),
    ("emergency_contact_relation", "emergencyContactRelation"),
    ("doctor_clearance", "doctorClearance"),
]

KID_PAYLOAD_FIELDS = [
    ("name", "name"),
    ("age", "age"),
    ("gender", "gender"),
    ("tshirt_size", "tshirtSize"),
]


def _clean(value: Any) -> Any:
    if isinstance(value, str):
        return value.strip()
    return value


@dataclass
class Kid:
    """Dependent record for a child attending with the participant."""

    name: str = ""
    age: Optional[int] = None
    gender: Optional[str] = None
    tshirt_size: Optional[str] = None

    def to_payload(self) -> Dict[str, Any]:
        payload = {}
        for attr, key in KID_PAYLOAD_FIELDS:
            value = _clean(getattr(self, attr))
            if value is not None:
                payload[key] = value
        return payload

    @classmethod
    def from_payload(cls, data: Dict[str, Any]) -> "Kid":
        return cls(**{attr: data[key] for attr, key in KID_PAYLOAD_FIELDS if key in data})


@dataclass
class Registration:
    """
    Single participant registration, mutated field by field while the form is filled in.

    The record is permissive on purpose: required fields start empty and are
    checked as a whole by ``validate_registration`` on submit. The only rule
    enforced at all times is that ``kids`` holds exactly ``number_of_kids``
    dependent records.
    """

    full_name: str = ""
    email: str = ""
    phone: str = ""
    department: str = ""
    gender: Optional[str] = None
    tshirt_size: Optional[str] = None

    bringing_kids: bool = False
    number_of_kids: int = 0
    kids: List[Kid] = field(default_factory=list)

    entertainment_sports: List[str] = field(default_factory=list)
    interested_in_competing: bool = False
    competitive_sports: List[str] = field(default_factory=list)

    last_exercise: Optional[str] = None
    medical_conditions: List[str] = field(default_factory=list)
    current_medications: str = ""
    previous_injuries: str = ""
    physical_limitations: str = ""
    health_concerns: str = ""

    has_medical_conditions: Optional[bool] = None
    has_heart_condition: Optional[bool] = None
    has_chest_pain: Optional[bool] = None
    has_balance_issues: Optional[bool] = None

    has_other_health_info: Optional[bool] = None
    is_taking_medications: Optional[bool] = None
    has_immediate_health_concerns: Optional[bool] = None

    guardian_name: str = ""
    guardian_signature: str = ""
    emergency_contact_name: str = ""
    emergency_contact_phone: str = ""
    emergency_contact_relation: str = ""
    doctor_clearance: bool = False

    def __post_init__(self):
        """Check the dependent-record invariant."""
        if self.number_of_kids < 0:
            raise ValueError("Number of kids cannot be negative")

        if len(self.kids) != self.number_of_kids:
            raise ValueError(
                f"Kids count ({len(self.kids)}) must match "
                f"number of kids ({self.number_of_kids})"
            )

    # ------------------------------------------------------------------ #
    # Family
    # ------------------------------------------------------------------ #

    def set_bringing_kids(self, bringing: bool) -> None:
        self.bringing_kids = bool(bringing)
        if not self.bringing_kids:
            self.set_kid_count(0)

    def set_kid_count(self, count: int) -> None:
        """
        Resize the dependent list to ``count`` entries.

        Existing records are kept by index so typing in kid #1 survives
        switching from two kids to three and back.
        """
        if count < 0:
            raise ValueError("Number of kids cannot be negative")

        current = self.kids[:count]
        current.extend(Kid() for _ in range(count - len(current)))
        self.kids = current
        self.number_of_kids = count

    # ------------------------------------------------------------------ #
    # Multi-select fields
    # ------------------------------------------------------------------ #

    def toggle_entertainment_sport(self, value: str, checked: bool) -> None:
        _toggle(self.entertainment_sports, value, checked, option_values(ENTERTAINMENT_SPORTS))

    def toggle_medical_condition(self, value: str, checked: bool) -> None:
        _toggle(self.medical_conditions, value, checked, option_values(MEDICAL_CONDITIONS))

    def set_interested_in_competing(self, interested: bool) -> None:
        self.interested_in_competing = bool(interested)
        if not self.interested_in_competing:
            self.competitive_sports = []

    def toggle_competitive_sport(self, value: str, checked: bool) -> bool:
        """
        Select or deselect a competitive sport.

        Returns:
            False if the sport could not be checked because the limit of
            MAX_COMPETITIVE_SPORTS is already reached, True otherwise.
        """
        if checked and self.is_competitive_option_disabled(value):
            return False
        _toggle(self.competitive_sports, value, checked, option_values(COMPETITIVE_SPORTS))
        return True

    def is_competitive_option_disabled(self, value: str) -> bool:
        """An unchecked option is disabled once the selection limit is reached."""
        if value in self.competitive_sports:
            return False
        return len(self.competitive_sports) >= MAX_COMPETITIVE_SPORTS

    # ------------------------------------------------------------------ #
    # Serialization
    # ------------------------------------------------------------------ #

    def to_payload(self) -> Dict[str, Any]:
        """
        Build the JSON document POSTed to the registration endpoint.

        Unanswered optional values are left out. Family and competition
        details only travel when the matching yes/no answer is yes.
        """
        payload: Dict[str, Any] = {}
        for attr, key in PAYLOAD_FIELDS:
            value = getattr(self, attr)
            if attr == "kids":
                value = [kid.to_payload() for kid in value] if self.bringing_kids else []
            elif attr == "number_of_kids":
                value = value if self.bringing_kids else 0
            elif attr == "competitive_sports":
                value = list(value) if self.interested_in_competing else []
            elif isinstance(value, list):
                value = list(value)
            else:
                value = _clean(value)

            if value is None:
                continue
            payload[key] = value
        return payload

    @classmethod
    def from_payload(cls, data: Dict[str, Any]) -> "Registration":
        """Rebuild a registration from an endpoint payload; unknown keys are ignored."""
        kwargs: Dict[str, Any] = {}
        for attr, key in PAYLOAD_FIELDS:
            if key not in data:
                continue
            value = data[key]
            if attr == "kids":
                value = [Kid.from_payload(kid) for kid in value or []]
            elif isinstance(value, list):
                value = list(value)
            kwargs[attr] = value

        if "kids" in kwargs and "number_of_kids" not in kwargs:
            kwargs["number_of_kids"] = len(kwargs["kids"])
        if kwargs.get("number_of_kids") is None:
            kwargs["number_of_kids"] = len(kwargs.get("kids", []))
        return cls(**kwargs)


def _toggle(selection: List[str], value: str, checked: bool, allowed: List[str]) -> None:
    if value not in allowed:
        raise ValueError(f"Unknown option: {value}")

    if checked:
        if value not in selection:
            selection.append(value)
    elif value in selection:
        selection.remove(value)
