"""Tests for Registration model."""
import pytest

from src.models.registration import Kid, Registration


@pytest.fixture
def registration():
    """Create a registration with the personal section filled in."""
    return Registration(
        full_name="  Aisha Rahman ",
        email="aisha.rahman@company.ae",
        phone="0501234567",
        department="Finance",
        gender="female",
        tshirt_size="M",
    )


class TestRegistrationDefaults:
    """Tests for an empty registration."""

    def test_empty_registration_has_form_defaults(self):
        """Fresh registration should match the blank form."""
        reg = Registration()

        assert reg.full_name == ""
        assert reg.gender is None
        assert reg.tshirt_size is None
        assert reg.bringing_kids is False
        assert reg.number_of_kids == 0
        assert reg.kids == []
        assert reg.entertainment_sports == []
        assert reg.interested_in_competing is False
        assert reg.competitive_sports == []
        assert reg.last_exercise is None
        assert reg.medical_conditions == []
        assert reg.has_heart_condition is None
        assert reg.guardian_signature == ""
        assert reg.doctor_clearance is False

    def test_lists_are_not_shared_between_instances(self):
        """Each registration should own its own lists."""
        first = Registration()
        second = Registration()

        first.toggle_entertainment_sport("tennis", True)

        assert second.entertainment_sports == []

    def test_kids_must_match_number_of_kids(self):
        """Mismatched kid list should raise ValueError."""
        with pytest.raises(ValueError, match="must match number of kids"):
            Registration(number_of_kids=2, kids=[Kid()])

    def test_negative_number_of_kids_raises_error(self):
        """Negative kid count should raise ValueError."""
        with pytest.raises(ValueError, match="cannot be negative"):
            Registration(number_of_kids=-1)


class TestKidCount:
    """Tests for resizing the dependent list."""

    def test_set_kid_count_creates_blank_records(self):
        reg = Registration(bringing_kids=True)

        reg.set_kid_count(3)

        assert reg.number_of_kids == 3
        assert reg.kids == [Kid(), Kid(), Kid()]

    def test_set_kid_count_keeps_existing_records(self):
        reg = Registration(bringing_kids=True)
        reg.set_kid_count(2)
        reg.kids[0].name = "Omar"
        reg.kids[1].name = "Layla"

        reg.set_kid_count(1)
        reg.set_kid_count(3)

        assert [kid.name for kid in reg.kids] == ["Omar", "", ""]
        assert len(reg.kids) == reg.number_of_kids

    def test_set_kid_count_negative_raises_error(self):
        reg = Registration()

        with pytest.raises(ValueError, match="cannot be negative"):
            reg.set_kid_count(-2)

    def test_not_bringing_kids_clears_dependents(self):
        reg = Registration()
        reg.set_bringing_kids(True)
        reg.set_kid_count(2)

        reg.set_bringing_kids(False)

        assert reg.bringing_kids is False
        assert reg.number_of_kids == 0
        assert reg.kids == []


class TestSelections:
    """Tests for multi-select fields."""

    def test_toggle_entertainment_sport_keeps_order_without_duplicates(self):
        reg = Registration()

        reg.toggle_entertainment_sport("padel", True)
        reg.toggle_entertainment_sport("badminton", True)
        reg.toggle_entertainment_sport("padel", True)

        assert reg.entertainment_sports == ["padel", "badminton"]

    def test_untoggle_entertainment_sport(self):
        reg = Registration(entertainment_sports=["padel", "tennis"])

        reg.toggle_entertainment_sport("padel", False)

        assert reg.entertainment_sports == ["tennis"]

    def test_unknown_sport_raises_error(self):
        reg = Registration()

        with pytest.raises(ValueError, match="Unknown option: chess"):
            reg.toggle_entertainment_sport("chess", True)

    def test_running_is_not_an_entertainment_sport(self):
        reg = Registration()

        with pytest.raises(ValueError):
            reg.toggle_entertainment_sport("running", True)

    def test_toggle_medical_condition(self):
        reg = Registration()

        reg.toggle_medical_condition("asthma", True)
        reg.toggle_medical_condition("diabetes", True)
        reg.toggle_medical_condition("asthma", False)

        assert reg.medical_conditions == ["diabetes"]

    def test_competitive_sports_limited_to_two(self):
        reg = Registration(interested_in_competing=True)

        assert reg.toggle_competitive_sport("football", True) is True
        assert reg.toggle_competitive_sport("running", True) is True
        assert reg.toggle_competitive_sport("padel", True) is False

        assert reg.competitive_sports == ["football", "running"]

    def test_competitive_option_disabled_once_limit_reached(self):
        reg = Registration(interested_in_competing=True, competitive_sports=["football", "padel"])

        assert reg.is_competitive_option_disabled("running") is True
        assert reg.is_competitive_option_disabled("basketball") is True
        # Selected options stay enabled so they can be unchecked
        assert reg.is_competitive_option_disabled("football") is False

    def test_competitive_option_enabled_below_limit(self):
        reg = Registration(interested_in_competing=True, competitive_sports=["football"])

        assert reg.is_competitive_option_disabled("running") is False

    def test_unchecking_frees_a_slot(self):
        reg = Registration(interested_in_competing=True, competitive_sports=["football", "padel"])

        reg.toggle_competitive_sport("padel", False)

        assert reg.toggle_competitive_sport("running", True) is True
        assert reg.competitive_sports == ["football", "running"]

    def test_not_competing_clears_selection(self):
        reg = Registration(interested_in_competing=True, competitive_sports=["running"])

        reg.set_interested_in_competing(False)

        assert reg.competitive_sports == []


class TestPayload:
    """Tests for serialization to the endpoint format."""

    def test_payload_uses_endpoint_keys(self, registration):
        payload = registration.to_payload()

        assert payload["fullName"] == "Aisha Rahman"
        assert payload["parentTshirtSize"] == "M"
        assert payload["bringingKids"] is False
        assert payload["numberOfKids"] == 0
        assert payload["kids"] == []
        assert payload["doctorClearance"] is False

    def test_payload_omits_unanswered_questions(self, registration):
        payload = registration.to_payload()

        assert "lastExercise" not in payload
        assert "hasHeartCondition" not in payload
        assert "hasImmediateHealthConcerns" not in payload

    def test_payload_keeps_explicit_false_answers(self, registration):
        registration.has_chest_pain = False

        assert registration.to_payload()["hasChestPain"] is False

    def test_payload_serializes_kids(self, registration):
        registration.set_bringing_kids(True)
        registration.set_kid_count(1)
        registration.kids[0] = Kid(name=" Omar ", age=7, gender="male", tshirt_size="S")

        payload = registration.to_payload()

        assert payload["numberOfKids"] == 1
        assert payload["kids"] == [{"name": "Omar", "age": 7, "gender": "male", "tshirtSize": "S"}]

    def test_payload_drops_kids_when_not_bringing_them(self):
        reg = Registration(bringing_kids=False, number_of_kids=1, kids=[Kid(name="Omar")])

        payload = reg.to_payload()

        assert payload["numberOfKids"] == 0
        assert payload["kids"] == []

    def test_payload_drops_competitive_sports_when_not_competing(self):
        reg = Registration(interested_in_competing=False, competitive_sports=["running"])

        assert reg.to_payload()["competitiveSports"] == []

    def test_payload_lists_are_copies(self, registration):
        registration.toggle_entertainment_sport("tennis", True)

        payload = registration.to_payload()
        payload["entertainmentSports"].append("padel")

        assert registration.entertainment_sports == ["tennis"]

    def test_from_payload_rebuilds_registration(self):
        data = {
            "fullName": "Omar Saeed",
            "email": "omar@company.ae",
            "bringingKids": True,
            "numberOfKids": 1,
            "kids": [{"name": "Sara", "age": 4, "gender": "female", "tshirtSize": "XS"}],
            "competitiveSports": ["running"],
            "unexpectedKey": "ignored",
        }

        reg = Registration.from_payload(data)

        assert reg.full_name == "Omar Saeed"
        assert reg.bringing_kids is True
        assert reg.kids == [Kid(name="Sara", age=4, gender="female", tshirt_size="XS")]
        assert reg.competitive_sports == ["running"]

    def test_from_payload_infers_kid_count(self):
        reg = Registration.from_payload({"bringingKids": True, "kids": [{"name": "Sara"}]})

        assert reg.number_of_kids == 1
