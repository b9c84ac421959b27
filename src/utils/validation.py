"""Registration validation rules."""
import re
from typing import Any, Dict, Iterable, Optional, Tuple

from src.models.choices import (
    COMPETITIVE_SPORTS,
    ENTERTAINMENT_SPORTS,
    EXERCISE_OPTIONS,
    GENDERS,
    KID_COUNT_OPTIONS,
    MAX_COMPETITIVE_SPORTS,
    MAX_KID_AGE,
    MEDICAL_CONDITIONS,
    MIN_KID_AGE,
    TSHIRT_SIZES,
    option_values,
)
from src.models.registration import Kid, Registration
from src.utils.exceptions import RegistrationValidationError

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

# UAE mobile: optional +971 or 0 prefix, then 5[024568] and seven digits.
UAE_MOBILE_PATTERN = re.compile(r"^((\+971)|0)?5[024568]\d{7}$")


def validate_required_text(value: Optional[str], message: str) -> Tuple[bool, str]:
    """
    Validate that a text field is filled in.

    Args:
        value: Field value
        message: Error message to return when empty

    Returns:
        Tuple of (is_valid: bool, error_message: str)
    """
    if value is None or not str(value).strip():
        return False, message
    return True, ""


def validate_email(email: Optional[str]) -> Tuple[bool, str]:
    """
    Validate email address.

    Returns:
        Tuple of (is_valid: bool, error_message: str)
        - (True, "") if valid
        - (False, "Valid email is required") if empty or malformed
    """
    if not email or not EMAIL_PATTERN.match(email.strip()):
        return False, "Valid email is required"
    return True, ""


def normalize_phone(phone: str) -> str:
    """
    Strip separators participants commonly type into phone numbers.

    Example: "+971 50-123 4567" -> "+971501234567"
    """
    return re.sub(r"[\s\-()]", "", phone or "")


def validate_phone(phone: Optional[str]) -> Tuple[bool, str]:
    """
    Validate a UAE mobile number.

    Returns:
        Tuple of (is_valid: bool, error_message: str)
        - (True, "") if valid
        - (False, "Phone number is required") if empty
        - (False, "Must be a valid UAE mobile number") if the pattern does not match
    """
    if not phone or not phone.strip():
        return False, "Phone number is required"
    if not UAE_MOBILE_PATTERN.match(normalize_phone(phone)):
        return False, "Must be a valid UAE mobile number"
    return True, ""


def validate_choice(value: Any, options: Iterable[Any], message: str) -> Tuple[bool, str]:
    """Validate that ``value`` is one of ``options``."""
    if value is None or value not in list(options):
        return False, message
    return True, ""


def validate_kid_age(age: Any) -> Tuple[bool, str]:
    """
    Validate a dependent's age.

    Returns:
        Tuple of (is_valid: bool, error_message: str)
        - (False, "Age is required") if missing
        - (False, "Age must be between 0 and 18") if not a whole number in range
    """
    if age is None or age == "":
        return False, "Age is required"
    if isinstance(age, bool) or not isinstance(age, int):
        return False, f"Age must be between {MIN_KID_AGE} and {MAX_KID_AGE}"
    if age < MIN_KID_AGE or age > MAX_KID_AGE:
        return False, f"Age must be between {MIN_KID_AGE} and {MAX_KID_AGE}"
    return True, ""


def validate_kid(kid: Kid) -> Dict[str, str]:
    """
    Validate one dependent record.

    Returns:
        Dict of payload field name -> error message (empty when valid)
    """
    errors: Dict[str, str] = {}

    checks = [
        ("name", validate_required_text(kid.name, "Name is required")),
        ("age", validate_kid_age(kid.age)),
        ("gender", validate_choice(kid.gender, GENDERS, "Gender is required")),
        ("tshirtSize", validate_choice(kid.tshirt_size, TSHIRT_SIZES, "T-shirt size is required")),
    ]
    for key, (is_valid, message) in checks:
        if not is_valid:
            errors[key] = message
    return errors


def _validate_selection(values, allowed, empty_message: Optional[str]) -> Tuple[bool, str]:
    if empty_message and not values:
        return False, empty_message
    unknown = [value for value in values if value not in allowed]
    if unknown:
        return False, f"Unknown selection: {', '.join(unknown)}"
    return True, ""


def validate_registration(registration: Registration) -> Dict[str, str]:
    """
    Validate a whole registration.

    Args:
        registration: Registration to check

    Returns:
        Dict of field path -> error message, in form order. Paths use the
        payload key names, with ``kids.<index>.<field>`` for dependents.
        An empty dict means the registration can be submitted.
    """
    errors: Dict[str, str] = {}

    def check(path: str, result: Tuple[bool, str]) -> None:
        is_valid, message = result
        if not is_valid:
            errors[path] = message

    # Personal information
    check("fullName", validate_required_text(registration.full_name, "Full name is required"))
    check("email", validate_email(registration.email))
    check("phone", validate_phone(registration.phone))
    check("department", validate_required_text(registration.department, "Department is required"))
    check("gender", validate_choice(registration.gender, GENDERS, "Please select your gender"))
    check(
        "parentTshirtSize",
        validate_choice(registration.tshirt_size, TSHIRT_SIZES, "Please select your T-shirt size"),
    )

    # Family participation
    if registration.bringing_kids:
        check(
            "numberOfKids",
            validate_choice(
                registration.number_of_kids,
                KID_COUNT_OPTIONS,
                "Please select how many kids you are bringing",
            ),
        )
        if len(registration.kids) != registration.number_of_kids:
            errors["kids"] = "Kid details must match the number of kids"
        for index, kid in enumerate(registration.kids):
            for key, message in validate_kid(kid).items():
                errors[f"kids.{index}.{key}"] = message

    # Sports preferences
    check(
        "entertainmentSports",
        _validate_selection(
            registration.entertainment_sports,
            option_values(ENTERTAINMENT_SPORTS),
            "Please select at least one sport preference.",
        ),
    )
    if registration.interested_in_competing:
        if len(registration.competitive_sports) > MAX_COMPETITIVE_SPORTS:
            errors["competitiveSports"] = (
                f"Please select up to {MAX_COMPETITIVE_SPORTS} competitive sports."
            )
        else:
            check(
                "competitiveSports",
                _validate_selection(
                    registration.competitive_sports,
                    option_values(COMPETITIVE_SPORTS),
                    None,
                ),
            )

    # Health
    check(
        "lastExercise",
        validate_choice(
            registration.last_exercise,
            option_values(EXERCISE_OPTIONS),
            "Please answer when you last exercised.",
        ),
    )
    check(
        "medicalConditions",
        _validate_selection(
            registration.medical_conditions,
            option_values(MEDICAL_CONDITIONS),
            "Please select at least one medical condition.",
        ),
    )

    # Declaration
    check(
        "guardianSignature",
        validate_required_text(registration.guardian_signature, "Guardian signature is required"),
    )

    return errors


def ensure_valid_registration(registration: Registration) -> None:
    """
    Raise if the registration cannot be submitted.

    Raises:
        RegistrationValidationError: carrying the field path -> message dict
    """
    errors = validate_registration(registration)
    if errors:
        raise RegistrationValidationError(errors)
