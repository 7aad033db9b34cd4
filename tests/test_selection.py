import random

import pytest

from src.scheduling import FirstPhysicianPicker, RandomPhysicianPicker
from src.scheduling.entities import Physician, Specialty

CANDIDATES = [Physician(id=i, specialty=Specialty.DERMATOLOGY) for i in (4, 2, 9)]


def test_seeded_random_picker_is_repeatable():
    first = [RandomPhysicianPicker(random.Random(7)).pick(CANDIDATES) for _ in range(5)]
    second = [RandomPhysicianPicker(random.Random(7)).pick(CANDIDATES) for _ in range(5)]
    assert first == second


def test_random_picker_only_returns_candidates():
    picker = RandomPhysicianPicker(random.Random(1))
    picks = {picker.pick(CANDIDATES).id for _ in range(50)}
    assert picks <= {4, 2, 9}
    assert len(picks) > 1


def test_first_picker_takes_lowest_id():
    assert FirstPhysicianPicker().pick(CANDIDATES).id == 2


@pytest.mark.parametrize("picker", [RandomPhysicianPicker(), FirstPhysicianPicker()])
def test_pickers_reject_empty_candidates(picker):
    with pytest.raises(ValueError):
        picker.pick([])
