"""Registration form UI component."""
import logging
from typing import Callable, Dict, List, Optional

import streamlit as st

from src.models.choices import (
    COMPETITIVE_SPORTS,
    DECLARATION_TEXT,
    ENTERTAINMENT_SPORTS,
    EXERCISE_OPTIONS,
    GENDER_LABELS,
    GENDERS,
    KID_COUNT_OPTIONS,
    MAX_COMPETITIVE_SPORTS,
    MAX_KID_AGE,
    MEDICAL_CONDITIONS,
    MEDICAL_DETAIL_QUESTIONS,
    MIN_KID_AGE,
    READINESS_QUESTIONS,
    TSHIRT_SIZE_LABELS,
    TSHIRT_SIZES,
    option_label,
    option_values,
    size_label,
)
from src.models.form_state import RegistrationFormState
from src.models.registration import Kid
from src.services.form_state_service import dismiss_success, get_form_state, submit_form
from src.ui.html_utils import field_error_html, html_block, section_header_html

logger = logging.getLogger(__name__)

DIALOG_DECORATOR = getattr(st, "dialog", None) or getattr(st, "experimental_dialog", None)

YES_NO_OPTIONS = [True, False]


def _yes_no_label(value: bool) -> str:
    return "Yes" if value else "No"


def _kid_count_label(count: int) -> str:
    return f"{count} child" if count == 1 else f"{count} children"


def _index_of(options: List, value) -> Optional[int]:
    """Position of ``value`` in ``options`` or None, as st.radio/st.selectbox expect."""
    if value is None or value not in options:
        return None
    return options.index(value)


def _render_field_error(state: RegistrationFormState, path: str) -> None:
    message = state.error_for(path)
    if message:
        st.markdown(field_error_html(message), unsafe_allow_html=True)


def _sync_checkbox_group(
    state: RegistrationFormState,
    name: str,
    values: List[str],
    selection: List[str],
    toggle: Callable[[str, bool], object],
) -> None:
    """
    Apply pending checkbox clicks to the model before the group is drawn.

    Streamlit stores the new widget value before rerunning the script, so
    reading it here lets disabled-state derivation see the latest click.
    """
    for value in values:
        key = state.widget_key(f"{name}_{value}")
        if key in st.session_state:
            checked = bool(st.session_state[key])
            if checked != (value in selection):
                toggle(value, checked)


def _render_checkbox_group(
    state: RegistrationFormState,
    name: str,
    options: List[Dict[str, str]],
    selection: List[str],
    toggle: Callable[[str, bool], object],
    columns: int = 2,
    is_disabled: Optional[Callable[[str], bool]] = None,
) -> None:
    _sync_checkbox_group(state, name, option_values(options), selection, toggle)

    cols = st.columns(columns)
    for index, option in enumerate(options):
        value = option["value"]
        icon = option.get("icon")
        label = f"{icon} {option['label']}" if icon else option["label"]
        with cols[index % columns]:
            st.checkbox(
                label,
                value=value in selection,
                key=state.widget_key(f"{name}_{value}"),
                disabled=is_disabled(value) if is_disabled else False,
            )


# ---------------------------------------------------------------------- #
# Size chart
# ---------------------------------------------------------------------- #

def _size_chart_markdown() -> str:
    rows = ["| Size | Fit |", "| --- | --- |"]
    for size in TSHIRT_SIZES:
        rows.append(f"| {size} | {TSHIRT_SIZE_LABELS[size]} |")
    return "\n".join(rows)


def _render_size_chart_body() -> None:
    st.write(
        "Choose the perfect fit for you and your family. Our size chart helps ensure "
        "everyone gets comfortable, well-fitting event t-shirts."
    )
    st.markdown(_size_chart_markdown())
    st.info(
        "If you're between sizes, we recommend going with the larger size for a more "
        "comfortable fit during sports activities. For children, consider choosing a "
        "size slightly larger for comfort during active sports activities."
    )


if DIALOG_DECORATOR:

    @DIALOG_DECORATOR("📏 T-Shirt Size Chart")
    def _size_chart_dialog() -> None:
        _render_size_chart_body()
        if st.button("Got it, thanks!", use_container_width=True, type="primary"):
            st.rerun()

else:  # pragma: no cover - Streamlit < 1.34 without dialogs

    def _size_chart_dialog() -> None:
        with st.expander("📏 T-Shirt Size Chart", expanded=True):
            _render_size_chart_body()
            if st.button("Got it, thanks!", key="size_chart_close"):
                st.rerun()


def _render_size_chart_button(state: RegistrationFormState, name: str, label: str = "📏 Size Chart") -> None:
    if st.button(label, key=state.widget_key(f"size_chart_{name}")):
        _size_chart_dialog()


# ---------------------------------------------------------------------- #
# Sections
# ---------------------------------------------------------------------- #

def _render_personal_section(state: RegistrationFormState) -> None:
    reg = state.registration
    st.markdown(section_header_html("👤", "Personal Information"), unsafe_allow_html=True)

    col1, col2 = st.columns(2)
    with col1:
        reg.full_name = st.text_input(
            "Full Name *",
            value=reg.full_name,
            placeholder="Enter your full name",
            key=state.widget_key("full_name"),
        )
        _render_field_error(state, "fullName")

        reg.phone = st.text_input(
            "Phone Number *",
            value=reg.phone,
            placeholder="05X XXX XXXX",
            key=state.widget_key("phone"),
        )
        _render_field_error(state, "phone")

    with col2:
        reg.email = st.text_input(
            "Email Address *",
            value=reg.email,
            placeholder="your.email@company.com",
            key=state.widget_key("email"),
        )
        _render_field_error(state, "email")

        reg.department = st.text_input(
            "Department *",
            value=reg.department,
            placeholder="e.g., Engineering, Marketing, Sales",
            key=state.widget_key("department"),
        )
        _render_field_error(state, "department")

    col1, col2 = st.columns(2)
    with col1:
        reg.gender = st.radio(
            "Gender *",
            options=GENDERS,
            index=_index_of(GENDERS, reg.gender),
            format_func=lambda g: GENDER_LABELS.get(g, g),
            horizontal=True,
            key=state.widget_key("gender"),
        )
        _render_field_error(state, "gender")

    with col2:
        reg.tshirt_size = st.selectbox(
            "Your T-Shirt Size *",
            options=TSHIRT_SIZES,
            index=_index_of(TSHIRT_SIZES, reg.tshirt_size),
            format_func=size_label,
            placeholder="Select your size",
            key=state.widget_key("tshirt_size"),
        )
        _render_field_error(state, "parentTshirtSize")
        _render_size_chart_button(state, "parent")
        st.caption("💡 Not sure about your size? Click the \"Size Chart\" button for detailed measurements.")


def _render_kid_fields(state: RegistrationFormState, index: int, kid: Kid) -> None:
    st.markdown(f"**Child {index + 1}**")
    name_col, age_col, gender_col, size_col = st.columns([2, 1, 1.2, 1.2])

    with name_col:
        kid.name = st.text_input(
            "Name",
            value=kid.name,
            placeholder="Name",
            key=state.widget_key(f"kid_{index}_name"),
        )
        _render_field_error(state, f"kids.{index}.name")

    with age_col:
        kid.age = st.number_input(
            "Age",
            min_value=MIN_KID_AGE,
            max_value=MAX_KID_AGE,
            value=kid.age,
            step=1,
            placeholder="Age",
            key=state.widget_key(f"kid_{index}_age"),
        )
        _render_field_error(state, f"kids.{index}.age")

    with gender_col:
        kid.gender = st.selectbox(
            "Gender",
            options=GENDERS,
            index=_index_of(GENDERS, kid.gender),
            format_func=lambda g: GENDER_LABELS.get(g, g),
            placeholder="Select gender",
            key=state.widget_key(f"kid_{index}_gender"),
        )
        _render_field_error(state, f"kids.{index}.gender")

    with size_col:
        kid.tshirt_size = st.selectbox(
            "T-Shirt Size",
            options=TSHIRT_SIZES,
            index=_index_of(TSHIRT_SIZES, kid.tshirt_size),
            placeholder="Select size",
            key=state.widget_key(f"kid_{index}_tshirt_size"),
        )
        _render_field_error(state, f"kids.{index}.tshirtSize")
        _render_size_chart_button(state, f"kid_{index}", label="📏 Size")


def _render_family_section(state: RegistrationFormState) -> None:
    reg = state.registration
    st.markdown(section_header_html("👶", "Family Participation"), unsafe_allow_html=True)

    bringing = st.radio(
        "Are you bringing kids? *",
        options=YES_NO_OPTIONS,
        index=_index_of(YES_NO_OPTIONS, reg.bringing_kids),
        format_func=_yes_no_label,
        horizontal=True,
        key=state.widget_key("bringing_kids"),
    )
    if bringing != reg.bringing_kids:
        reg.set_bringing_kids(bool(bringing))

    if not reg.bringing_kids:
        return

    count = st.selectbox(
        "How many kids?",
        options=KID_COUNT_OPTIONS,
        index=_index_of(KID_COUNT_OPTIONS, reg.number_of_kids),
        format_func=_kid_count_label,
        placeholder="Select number",
        key=state.widget_key("number_of_kids"),
    )
    if count is not None and count != reg.number_of_kids:
        reg.set_kid_count(count)
    _render_field_error(state, "numberOfKids")
    _render_field_error(state, "kids")

    for index, kid in enumerate(reg.kids):
        _render_kid_fields(state, index, kid)

    if reg.kids:
        st.caption("💡 Click \"Size\" button for detailed measurements.")


def _render_sports_section(state: RegistrationFormState) -> None:
    reg = state.registration
    st.markdown(section_header_html("🏆", "Sports Preferences"), unsafe_allow_html=True)
    st.markdown("Preferred Entertainment Sports (Select all that interest you)")

    _render_checkbox_group(
        state,
        "entertainment",
        ENTERTAINMENT_SPORTS,
        reg.entertainment_sports,
        reg.toggle_entertainment_sport,
        columns=3,
    )
    _render_field_error(state, "entertainmentSports")


def _render_competition_section(state: RegistrationFormState) -> None:
    reg = state.registration
    st.markdown(section_header_html("🥇", "Competition Participation"), unsafe_allow_html=True)

    interested = st.radio(
        "Interested in competing? *",
        options=YES_NO_OPTIONS,
        index=_index_of(YES_NO_OPTIONS, reg.interested_in_competing),
        format_func=lambda v: "Yes, I want to compete!" if v else "No, just for fun",
        horizontal=True,
        key=state.widget_key("interested_in_competing"),
    )
    if interested != reg.interested_in_competing:
        reg.set_interested_in_competing(bool(interested))

    if not reg.interested_in_competing:
        return

    st.caption(f"Select up to {MAX_COMPETITIVE_SPORTS} sports you'd like to compete in:")
    _render_checkbox_group(
        state,
        "competitive",
        COMPETITIVE_SPORTS,
        reg.competitive_sports,
        reg.toggle_competitive_sport,
        columns=2,
        is_disabled=reg.is_competitive_option_disabled,
    )
    _render_field_error(state, "competitiveSports")


def _render_health_section(state: RegistrationFormState) -> None:
    reg = state.registration
    st.markdown(section_header_html("❤️", "Health & Exercise Information"), unsafe_allow_html=True)

    exercise_values = option_values(EXERCISE_OPTIONS)
    reg.last_exercise = st.selectbox(
        "When did you last exercise? *",
        options=exercise_values,
        index=_index_of(exercise_values, reg.last_exercise),
        format_func=lambda v: option_label(EXERCISE_OPTIONS, v),
        placeholder="Select timeframe",
        key=state.widget_key("last_exercise"),
    )
    _render_field_error(state, "lastExercise")

    st.markdown("Do you have any of the following medical conditions? (Select all that apply) *")
    _render_checkbox_group(
        state,
        "condition",
        MEDICAL_CONDITIONS,
        reg.medical_conditions,
        reg.toggle_medical_condition,
        columns=2,
    )
    _render_field_error(state, "medicalConditions")

    col1, col2 = st.columns(2)
    with col1:
        reg.current_medications = st.text_area(
            "Current medications (Optional)",
            value=reg.current_medications,
            placeholder="List any medications you are currently taking...",
            key=state.widget_key("current_medications"),
        )
    with col2:
        reg.previous_injuries = st.text_area(
            "Previous injuries or surgeries (Optional)",
            value=reg.previous_injuries,
            placeholder="Describe any previous injuries or surgeries that might affect your participation...",
            key=state.widget_key("previous_injuries"),
        )

    reg.physical_limitations = st.text_area(
        "Physical limitations or restrictions (Optional)",
        value=reg.physical_limitations,
        placeholder="Describe any physical limitations, disabilities, or restrictions we should be aware of...",
        key=state.widget_key("physical_limitations"),
    )
    reg.health_concerns = st.text_area(
        "Additional health concerns or allergies (Optional)",
        value=reg.health_concerns,
        placeholder=(
            "Please mention any other health conditions, allergies, or dietary "
            "restrictions we should be aware of..."
        ),
        key=state.widget_key("health_concerns"),
    )


def _render_yes_no_questions(state: RegistrationFormState, heading: str, questions) -> None:
    reg = state.registration
    st.markdown(f"#### {heading}")
    for number, (attr, question) in enumerate(questions, start=1):
        answer = st.radio(
            f"{number}. {question}",
            options=YES_NO_OPTIONS,
            index=_index_of(YES_NO_OPTIONS, getattr(reg, attr)),
            format_func=_yes_no_label,
            horizontal=True,
            key=state.widget_key(attr),
        )
        setattr(reg, attr, answer)


def _render_declaration_section(state: RegistrationFormState) -> None:
    reg = state.registration
    st.markdown(section_header_html("✍️", "Declaration and Data Subject Consent"), unsafe_allow_html=True)
    st.markdown(
        html_block(f"""
            <div class="declaration-box">
                <p>{DECLARATION_TEXT}</p>
            </div>
        """),
        unsafe_allow_html=True,
    )

    with st.expander("Emergency contact & guardian details (Optional)"):
        col1, col2, col3 = st.columns(3)
        with col1:
            reg.emergency_contact_name = st.text_input(
                "Emergency contact name",
                value=reg.emergency_contact_name,
                key=state.widget_key("emergency_contact_name"),
            )
        with col2:
            reg.emergency_contact_phone = st.text_input(
                "Emergency contact phone",
                value=reg.emergency_contact_phone,
                key=state.widget_key("emergency_contact_phone"),
            )
        with col3:
            reg.emergency_contact_relation = st.text_input(
                "Relationship",
                value=reg.emergency_contact_relation,
                key=state.widget_key("emergency_contact_relation"),
            )
        reg.guardian_name = st.text_input(
            "Guardian name",
            value=reg.guardian_name,
            help="Only needed when registering on behalf of someone else",
            key=state.widget_key("guardian_name"),
        )

    reg.doctor_clearance = st.checkbox(
        "I have been cleared by a doctor to take part in physical activity",
        value=reg.doctor_clearance,
        key=state.widget_key("doctor_clearance"),
    )

    reg.guardian_signature = st.text_input(
        "Digital Signature (Type your name to confirm) *",
        value=reg.guardian_signature,
        placeholder="Type your full name to confirm agreement",
        key=state.widget_key("guardian_signature"),
    )
    _render_field_error(state, "guardianSignature")


def _render_submit(state: RegistrationFormState) -> None:
    if state.errors:
        st.warning(f"Please fix the {len(state.errors)} highlighted field(s) above.")

    if state.last_error:
        title, message = state.last_error
        st.error(f"**Registration Failed: {title}**\n\n{message}")

    label = "Processing Registration..." if state.is_pending else "🏆 Complete Registration"
    if st.button(
        label,
        key=state.widget_key("submit"),
        type="primary",
        use_container_width=True,
        disabled=state.is_pending,
    ):
        with st.spinner("Processing Registration..."):
            submit_form(state)
        st.rerun()

    st.caption("✅ All data is securely saved • 📧 Confirmation email sent")


def render_success_panel(state: RegistrationFormState) -> None:
    """Thank-you panel shown in place of the form after a successful submission."""
    st.success("### ✅ Registration Successful!")
    st.write(
        "Thank you for registering for Company Sports Day. You'll receive a "
        "confirmation email shortly with event details."
    )
    if st.button("Register Another Person", key="register_another", type="primary"):
        dismiss_success(state)
        st.rerun()


def render_registration_form() -> None:
    """Render the registration form, or the thank-you panel after success."""
    state = get_form_state()

    if state.show_success:
        render_success_panel(state)
        return

    _render_personal_section(state)
    _render_family_section(state)
    _render_sports_section(state)
    _render_competition_section(state)
    _render_health_section(state)
    _render_yes_no_questions(state, "Physical Activity Readiness Questionnaire", READINESS_QUESTIONS)
    _render_yes_no_questions(state, "Medical Details", MEDICAL_DETAIL_QUESTIONS)
    _render_declaration_section(state)
    _render_submit(state)
