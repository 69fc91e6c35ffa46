"""Tests for the hospital, patient and donor services."""
import pytest

from bloodpledge.core.exceptions import InvalidPayload, NotFound, Unauthorized
from bloodpledge.core.redaction import PASSWORD_MASK
from bloodpledge.core.security import verify_password


def _hospital(hospitals, name="City Gen", city="Metro", password="pw1"):
    return hospitals.add_hospital({"name": name, "address": "1 Main St", "password": password, "city": city})


def _patient(patients, **overrides):
    payload = {
        "name": "Sam Rivera",
        "blood_group": "AB-",
        "hospital": "City Gen",
        "description": "Post-operative anaemia",
        "needed_pints": 3,
        "password": "pw3",
    }
    payload.update(overrides)
    return patients.add_patient(payload)


class TestHospitals:
    def test_add_hospital_returns_masked_record(self, hospitals, stored):
        hospital = _hospital(hospitals)
        assert hospital.password == PASSWORD_MASK
        assert hospital.donations == 0
        assert hospital.donors_ids == []
        # Only a hash is stored
        raw = stored("hospitals", hospital.id).password
        assert raw != "pw1"
        assert verify_password("pw1", raw)

    @pytest.mark.parametrize("field", ["name", "address"])
    def test_add_hospital_validates_lengths(self, hospitals, field):
        payload = {"name": "City Gen", "address": "1 Main St", "password": "pw1", "city": "Metro", field: "ab"}
        with pytest.raises(InvalidPayload):
            hospitals.add_hospital(payload)

    def test_list_hospitals_empty_is_not_found(self, hospitals):
        with pytest.raises(NotFound, match="no hospitals found"):
            hospitals.list_hospitals()

    def test_list_hospitals_masks_every_record(self, hospitals):
        _hospital(hospitals, name="City Gen")
        _hospital(hospitals, name="Harbor Clinic", city="Bayside")
        listed = hospitals.list_hospitals()
        assert [h.name for h in listed] == ["City Gen", "Harbor Clinic"]
        assert all(h.password == PASSWORD_MASK for h in listed)

    def test_search_matches_city_or_name_case_insensitive(self, hospitals):
        _hospital(hospitals, name="City Gen", city="Metro")
        _hospital(hospitals, name="Harbor Clinic", city="Bayside")
        _hospital(hospitals, name="Metro Heart", city="Uptown")

        assert [h.name for h in hospitals.search_hospitals("METRO")] == ["City Gen", "Metro Heart"]
        assert [h.name for h in hospitals.search_hospitals("harbor")] == ["Harbor Clinic"]
        assert all(h.password == PASSWORD_MASK for h in hospitals.search_hospitals("e"))

    def test_search_without_match_is_not_found(self, hospitals):
        _hospital(hospitals)
        with pytest.raises(NotFound, match="nowhere"):
            hospitals.search_hospitals("Nowhere")

    def test_get_hospital(self, hospitals):
        created = _hospital(hospitals)
        fetched = hospitals.get_hospital(created.id)
        assert fetched.name == "City Gen"
        assert fetched.password == PASSWORD_MASK

    def test_get_missing_hospital(self, hospitals):
        with pytest.raises(NotFound, match="hospital of id: 12 not found"):
            hospitals.get_hospital(12)

    def test_get_hospital_beyond_storable_range(self, hospitals):
        with pytest.raises(NotFound):
            hospitals.get_hospital(2**64 - 1)

    def test_edit_hospital_renames_only(self, hospitals, stored):
        created = _hospital(hospitals)
        before = stored("hospitals", created.id)
        edited = hospitals.edit_hospital({"hospital_id": created.id, "name": "City General", "password": "pw1"})
        assert edited.name == "City General"
        assert edited.password == PASSWORD_MASK

        after = stored("hospitals", created.id)
        assert after.name == "City General"
        assert after.model_dump(exclude={"name"}) == before.model_dump(exclude={"name"})

    def test_edit_hospital_wrong_password_leaves_record_unchanged(self, hospitals, stored):
        created = _hospital(hospitals)
        before = stored("hospitals", created.id)
        with pytest.raises(Unauthorized, match="password does not match"):
            hospitals.edit_hospital({"hospital_id": created.id, "name": "Hijacked", "password": "wrong"})
        assert stored("hospitals", created.id) == before

    def test_edit_hospital_short_name(self, hospitals):
        created = _hospital(hospitals)
        with pytest.raises(InvalidPayload):
            hospitals.edit_hospital({"hospital_id": created.id, "name": "X", "password": "pw1"})

    def test_edit_missing_hospital(self, hospitals):
        with pytest.raises(NotFound):
            hospitals.edit_hospital({"hospital_id": 3, "name": "City General", "password": "pw1"})


class TestPatients:
    def test_add_patient_starts_incomplete(self, patients):
        patient = _patient(patients)
        assert patient.donations == 0
        assert patient.is_complete is False
        assert patient.password == PASSWORD_MASK

    def test_add_patient_validates_description(self, patients):
        with pytest.raises(InvalidPayload):
            _patient(patients, description="short")

    def test_get_patient(self, patients):
        created = _patient(patients)
        assert patients.get_patient(created.id).name == "Sam Rivera"

    def test_get_missing_patient(self, patients):
        with pytest.raises(NotFound, match="patient id:5 does not exist"):
            patients.get_patient(5)

    def test_list_incomplete_patients(self, bank, patients):
        first = _patient(patients, name="Sam Rivera")
        second = _patient(patients, name="Kim Lee", needed_pints=2)
        listed = patients.list_incomplete_patients()
        assert [p.id for p in listed] == [first.id, second.id]
        assert all(p.password == PASSWORD_MASK for p in listed)

        patients.edit_patient({"patient_id": second.id, "needed_pints": 0, "is_complete": True, "password": "pw3"})
        assert [p.id for p in patients.list_incomplete_patients()] == [first.id]

    def test_list_incomplete_patients_empty(self, patients):
        with pytest.raises(NotFound, match="No patients for donations"):
            patients.list_incomplete_patients()

    def test_edit_patient_recomputes_completion(self, patients, stored):
        created = _patient(patients, needed_pints=3)
        edited = patients.edit_patient({
            "patient_id": created.id, "needed_pints": 5, "is_complete": True, "password": "pw3",
        })
        # Completion follows donations, not the supplied flag
        assert edited.needed_pints == 5
        assert edited.is_complete is False
        assert stored("patients", created.id).is_complete is False

    def test_edit_patient_wrong_password_leaves_record_unchanged(self, patients, stored):
        created = _patient(patients)
        before = stored("patients", created.id)
        with pytest.raises(Unauthorized):
            patients.edit_patient({"patient_id": created.id, "needed_pints": 9, "is_complete": False, "password": "nope"})
        assert stored("patients", created.id) == before

    def test_edit_missing_patient(self, patients):
        with pytest.raises(NotFound, match="patient of id: 8 not found"):
            patients.edit_patient({"patient_id": 8, "needed_pints": 1, "is_complete": False, "password": "pw3"})


class TestDonors:
    def test_add_and_get_donor(self, donors):
        created = donors.add_donor({"name": "Alex", "blood_group": "O+", "password": "pw22"})
        fetched = donors.get_donor(created.id)
        assert fetched.name == "Alex"
        assert fetched.beneficiaries == []
        assert fetched.password == PASSWORD_MASK

    @pytest.mark.parametrize("payload", [
        {"name": "Al", "blood_group": "O+", "password": "pw22"},
        {"name": "Alex", "blood_group": "O+"},
        {"name": "Alex", "password": "pw22"},
    ])
    def test_add_donor_rejects_invalid_payload(self, donors, payload):
        with pytest.raises(InvalidPayload):
            donors.add_donor(payload)

    def test_get_missing_donor(self, donors):
        with pytest.raises(NotFound, match="donor id:3 does not exist"):
            donors.get_donor(3)


def test_patient_needing_no_pints_is_complete_on_creation(patients):
    patient = _patient(patients, needed_pints=0)
    assert patient.is_complete is True


@pytest.mark.parametrize("needed_pints", [-1, 2**32])
def test_needed_pints_outside_unsigned_32_bit_range(patients, needed_pints):
    with pytest.raises(InvalidPayload):
        _patient(patients, needed_pints=needed_pints)


def test_password_hashed_before_taking_the_lock(monkeypatch, bank, donors):
    import bloodpledge.services.donors as donor_service

    held = []
    original = donor_service.get_password_hash

    def _hash(password):
        held.append(bank._lock.locked())
        return original(password)

    monkeypatch.setattr(donor_service, "get_password_hash", _hash)
    donors.add_donor({"name": "Alex", "blood_group": "O+", "password": "pw22"})
    assert held == [False]
