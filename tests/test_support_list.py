import pytest

from fastlanefury.constants import DriveState
from fastlanefury.shared_list import VehicleRecord
from fastlanefury.support_list import SupportInfo, SupportList


def test_add_captures_state_fields():
    support = SupportList()
    rec = VehicleRecord(speed=21.5, acceleration=-2.0, state=DriveState.SLOWDOWN)
    support.add(4, rec)
    assert support.get(4) == SupportInfo(4, DriveState.SLOWDOWN, -2.0, 21.5)


def test_snapshot_unaffected_by_later_changes():
    support = SupportList()
    rec = VehicleRecord(speed=10.0, acceleration=1.0, state=DriveState.ACCELERATE)
    support.add(2, rec)
    rec.speed = 0.0
    rec.state = DriveState.PAUSE
    info = support.get(2)
    assert info.speed == 10.0
    assert info.state is DriveState.ACCELERATE


def test_get_missing_raises():
    support = SupportList()
    support.add(1, VehicleRecord())
    with pytest.raises(KeyError):
        support.get(3)


def test_get_returns_oldest_of_duplicates():
    support = SupportList()
    support.add(5, VehicleRecord(speed=1.0))
    support.add(5, VehicleRecord(speed=2.0))
    assert support.get(5).speed == 1.0
    assert len(support) == 2


def test_clear_empties_list():
    support = SupportList()
    for vid in range(3):
        support.add(vid, VehicleRecord())
    support.clear()
    assert len(support) == 0
    with pytest.raises(KeyError):
        support.get(0)


def test_clear_on_empty_list_is_harmless():
    support = SupportList()
    support.clear()
    support.add(9, VehicleRecord(speed=3.0))
    assert support.get(9).speed == 3.0