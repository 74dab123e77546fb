from types import SimpleNamespace
import numpy as np
import pytest
from palmsignkit.hand.geometry import (Landmark, as_points, count_extended_fingers,
                                       distance, extended_fingers)
from hands import closed_fist, fake_hand, open_hand

def test_distance_ignores_depth():
    assert distance((0.0, 0.0, 5.0), (3.0, 4.0, -5.0)) == 5.0
    assert distance(Landmark(0.2, 0.2), Landmark(0.2, 0.2)) == 0.0

def test_count_open_and_closed():
    assert count_extended_fingers(open_hand()) == 5
    assert count_extended_fingers(closed_fist()) == 0

def test_extended_fingers_per_finger():
    states = extended_fingers(fake_hand(open_tips=(8,12)))
    assert states == {"thumb": False, "index": True, "middle": True, "ring": False, "pinky": False}

@pytest.mark.parametrize("shift", [(0.1, -0.2), (-0.3, 0.05), (2.0, 2.0)])
def test_count_is_translation_invariant(shift):
    for pts in (open_hand(), closed_fist(), fake_hand(open_tips=(8,16))):
        moved = pts.copy()
        moved[:,:2] += shift
        assert count_extended_fingers(moved) == count_extended_fingers(pts)

def test_tip_at_same_distance_is_not_extended():
    pts = closed_fist()
    pts[8] = pts[6]
    assert distance(pts[8], pts[0]) == distance(pts[6], pts[0])
    assert not extended_fingers(pts)["index"]

def test_as_points_accepts_landmark_objects_and_dicts():
    arr = open_hand()
    objs = [Landmark(*row) for row in arr]
    dicts = [{"x": r[0], "y": r[1], "z": r[2]} for r in arr]
    mp_like = SimpleNamespace(landmark=[SimpleNamespace(x=r[0], y=r[1], z=r[2]) for r in arr])
    for hand in (objs, dicts, mp_like, arr.tolist(), arr[:, :2]):
        pts = as_points(hand)
        assert pts is not None and pts.shape[0] == 21
        assert np.allclose(pts[:, :2], arr[:, :2])

def test_as_points_rejects_malformed():
    arr = open_hand()
    assert as_points(None) is None
    assert as_points([]) is None
    assert as_points(arr[:20]) is None
    assert as_points(np.vstack([arr, arr[:1]])) is None
    assert as_points(arr[:, :1]) is None
    assert as_points([{"x": 0.1}] * 21) is None
    assert as_points("not a hand") is None
    assert as_points([SimpleNamespace(x=0.1)] * 21) is None
    assert as_points([Landmark(*r) for r in arr[:20]] + [tuple(arr[20])]) is None

def test_as_points_rejects_non_finite():
    for bad in (np.nan, np.inf, -np.inf):
        pts = open_hand()
        pts[7, 2] = bad
        assert as_points(pts) is None

def test_as_points_keeps_out_of_range_coordinates():
    pts = open_hand()
    pts[:,0] += 1.5
    assert as_points(pts) is not None
