import random
import threading
from datetime import datetime

import pytest

from src.scheduling import (
    AppointmentScheduler,
    FirstPhysicianPicker,
    NoPhysicianAvailable,
    RandomPhysicianPicker,
    ScheduleRequest,
    SlotLocks,
    SpecialtyRequired,
    UnknownPatient,
    UnknownPhysician,
)
from src.scheduling.entities import Appointment, AppointmentStatus, Patient, Physician, Specialty
from tests.memory_stores import MemoryAppointments, MemoryPatients, MemoryPhysicians

SLOT = datetime(2025, 3, 1, 10, 0)


def _scheduler(patients, physicians, appointments, **kwargs):
    kwargs.setdefault("picker", FirstPhysicianPicker())
    return AppointmentScheduler(patients, physicians, appointments, **kwargs)


@pytest.fixture
def appointments():
    return MemoryAppointments()


@pytest.fixture
def patients():
    return MemoryPatients(Patient(id=7), Patient(id=8, active=False))


def test_assigns_free_physician_of_specialty(patients, appointments):
    physicians = MemoryPhysicians(appointments, Physician(id=3, specialty=Specialty.CARDIOLOGY))
    scheduler = _scheduler(patients, physicians, appointments)

    result = scheduler.schedule(
        ScheduleRequest(patient_id=7, specialty=Specialty.CARDIOLOGY, date_time=SLOT)
    )

    assert result.physician_id == 3
    assert result.patient_id == 7
    assert result.date_time == SLOT
    stored = appointments.get(result.appointment_id)
    assert stored.status == AppointmentStatus.SCHEDULED
    assert stored.physician_id == 3


def test_unknown_patient_creates_nothing(patients, appointments):
    physicians = MemoryPhysicians(appointments, Physician(id=3, specialty=Specialty.CARDIOLOGY))
    scheduler = _scheduler(patients, physicians, appointments)

    with pytest.raises(UnknownPatient):
        scheduler.schedule(
            ScheduleRequest(patient_id=404, specialty=Specialty.CARDIOLOGY, date_time=SLOT)
        )
    assert appointments.saved == []


def test_inactive_patient_is_rejected(patients, appointments):
    physicians = MemoryPhysicians(appointments, Physician(id=3, specialty=Specialty.CARDIOLOGY))
    scheduler = _scheduler(patients, physicians, appointments)

    with pytest.raises(UnknownPatient):
        scheduler.schedule(
            ScheduleRequest(patient_id=8, specialty=Specialty.CARDIOLOGY, date_time=SLOT)
        )


def test_unknown_physician(patients, appointments):
    physicians = MemoryPhysicians(appointments, Physician(id=3, specialty=Specialty.CARDIOLOGY))
    scheduler = _scheduler(patients, physicians, appointments)

    with pytest.raises(UnknownPhysician):
        scheduler.schedule(ScheduleRequest(patient_id=7, physician_id=99, date_time=SLOT))
    assert appointments.saved == []


def test_patient_checked_before_physician(patients, appointments):
    physicians = MemoryPhysicians(appointments)
    scheduler = _scheduler(patients, physicians, appointments)

    with pytest.raises(UnknownPatient):
        scheduler.schedule(ScheduleRequest(patient_id=404, physician_id=99, date_time=SLOT))


def test_specialty_required_without_physician(patients, appointments):
    physicians = MemoryPhysicians(appointments, Physician(id=3, specialty=Specialty.CARDIOLOGY))
    scheduler = _scheduler(patients, physicians, appointments)

    with pytest.raises(SpecialtyRequired):
        scheduler.schedule(ScheduleRequest(patient_id=7, date_time=SLOT))
    assert appointments.saved == []


def test_named_physician_is_used_without_specialty_check(patients, appointments):
    physicians = MemoryPhysicians(
        appointments,
        Physician(id=3, specialty=Specialty.CARDIOLOGY),
        Physician(id=4, specialty=Specialty.DERMATOLOGY),
    )
    scheduler = _scheduler(patients, physicians, appointments)

    result = scheduler.schedule(
        ScheduleRequest(
            patient_id=7, physician_id=4, specialty=Specialty.CARDIOLOGY, date_time=SLOT
        )
    )
    assert result.physician_id == 4


def test_no_physician_available_when_all_booked(patients):
    appointments = MemoryAppointments(
        Appointment(id=1, physician_id=3, patient_id=7, date_time=SLOT),
        Appointment(id=2, physician_id=5, patient_id=7, date_time=SLOT),
    )
    physicians = MemoryPhysicians(
        appointments,
        Physician(id=3, specialty=Specialty.CARDIOLOGY),
        Physician(id=5, specialty=Specialty.CARDIOLOGY),
        Physician(id=6, specialty=Specialty.ORTHOPEDICS),
    )
    scheduler = _scheduler(patients, physicians, appointments)

    with pytest.raises(NoPhysicianAvailable):
        scheduler.schedule(
            ScheduleRequest(patient_id=7, specialty=Specialty.CARDIOLOGY, date_time=SLOT)
        )
    assert appointments.saved == []


def test_inactive_and_busy_physicians_are_skipped(patients):
    appointments = MemoryAppointments(
        Appointment(id=1, physician_id=3, patient_id=7, date_time=SLOT),
    )
    physicians = MemoryPhysicians(
        appointments,
        Physician(id=2, specialty=Specialty.CARDIOLOGY, active=False),
        Physician(id=3, specialty=Specialty.CARDIOLOGY),
        Physician(id=9, specialty=Specialty.CARDIOLOGY),
    )
    scheduler = _scheduler(patients, physicians, appointments)

    result = scheduler.schedule(
        ScheduleRequest(patient_id=7, specialty=Specialty.CARDIOLOGY, date_time=SLOT)
    )
    assert result.physician_id == 9


def test_cancelled_appointment_frees_the_slot(patients):
    appointments = MemoryAppointments(
        Appointment(
            id=1,
            physician_id=3,
            patient_id=7,
            date_time=SLOT,
            status=AppointmentStatus.CANCELLED,
        ),
    )
    physicians = MemoryPhysicians(appointments, Physician(id=3, specialty=Specialty.CARDIOLOGY))
    scheduler = _scheduler(patients, physicians, appointments)

    result = scheduler.schedule(
        ScheduleRequest(patient_id=7, specialty=Specialty.CARDIOLOGY, date_time=SLOT)
    )
    assert result.physician_id == 3


def test_random_pick_stays_in_eligible_set(patients):
    appointments = MemoryAppointments(
        Appointment(id=1, physician_id=1, patient_id=7, date_time=SLOT),
    )
    physicians = MemoryPhysicians(
        appointments,
        *[Physician(id=i, specialty=Specialty.GYNECOLOGY) for i in range(1, 6)],
        Physician(id=6, specialty=Specialty.CARDIOLOGY),
    )
    scheduler = _scheduler(
        patients, physicians, appointments, picker=RandomPhysicianPicker(random.Random(42))
    )

    chosen = set()
    for minute in range(0, 50, 5):
        result = scheduler.schedule(
            ScheduleRequest(
                patient_id=7,
                specialty=Specialty.GYNECOLOGY,
                date_time=SLOT.replace(minute=minute),
            )
        )
        chosen.add(result.physician_id)

    assert chosen <= {1, 2, 3, 4, 5}
    # slot 10:00 excludes physician 1, later slots may use it
    first = appointments.saved[0]
    assert first.physician_id != 1


def test_concurrent_requests_do_not_double_book(patients, appointments):
    physicians = MemoryPhysicians(
        appointments, Physician(id=3, specialty=Specialty.CARDIOLOGY), delay=0.05
    )
    scheduler = _scheduler(patients, physicians, appointments, boundary=SlotLocks())

    barrier = threading.Barrier(2)
    outcomes = []

    def book():
        barrier.wait()
        try:
            scheduler.schedule(
                ScheduleRequest(patient_id=7, specialty=Specialty.CARDIOLOGY, date_time=SLOT)
            )
            outcomes.append("booked")
        except NoPhysicianAvailable:
            outcomes.append("unavailable")

    threads = [threading.Thread(target=book) for _ in range(2)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert sorted(outcomes) == ["booked", "unavailable"]
    assert len(appointments.saved) == 1


def test_slot_locks_are_released_after_each_call(patients, appointments):
    physicians = MemoryPhysicians(appointments, Physician(id=3, specialty=Specialty.CARDIOLOGY))
    locks = SlotLocks()
    scheduler = _scheduler(patients, physicians, appointments, boundary=locks)

    for second in range(50):
        with pytest.raises(UnknownPatient):
            scheduler.schedule(
                ScheduleRequest(
                    patient_id=404,
                    specialty=Specialty.CARDIOLOGY,
                    date_time=SLOT.replace(second=second),
                )
            )
    scheduler.schedule(ScheduleRequest(patient_id=7, specialty=Specialty.CARDIOLOGY, date_time=SLOT))
    with pytest.raises(NoPhysicianAvailable):
        scheduler.schedule(
            ScheduleRequest(patient_id=7, specialty=Specialty.CARDIOLOGY, date_time=SLOT)
        )

    assert len(locks) == 0


def test_slot_lock_entry_kept_while_held():
    locks = SlotLocks()
    with locks(SLOT):
        with locks(SLOT.replace(hour=11)):
            assert len(locks) == 2
        assert len(locks) == 1
    assert len(locks) == 0
