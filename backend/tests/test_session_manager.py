from utils.session_manager import (
    cleanup_old_sessions,
    get_cached_result,
    get_session_count,
    has_moved_significantly,
    save_result,
)

JAMSHEDPUR = (22.8046, 86.2029)


def test_small_move_is_not_significant():
    assert has_moved_significantly(None, JAMSHEDPUR) is True
    assert has_moved_significantly(JAMSHEDPUR, (22.8050, 86.2030)) is False
    assert has_moved_significantly(JAMSHEDPUR, (22.8500, 86.2029)) is True


def test_cached_result_needs_same_feature_and_nearby_fix():
    save_result("ambulance", "s1", *JAMSHEDPUR, result="cached")

    assert get_cached_result("ambulance", "s1", *JAMSHEDPUR) == "cached"
    assert get_cached_result("blood_bank", "s1", *JAMSHEDPUR) is None
    assert get_cached_result("ambulance", "s1", 22.8500, 86.2029) is None


def test_pruning_keeps_recently_rewritten_session():
    save_result("ambulance", "old", *JAMSHEDPUR, result="old")
    for i in range(100):
        save_result("ambulance", f"s{i}", *JAMSHEDPUR, result=i)
    save_result("ambulance", "old", *JAMSHEDPUR, result="old again")

    cleanup_old_sessions(max_sessions=100)

    assert get_cached_result("ambulance", "old", *JAMSHEDPUR) == "old again"
    assert get_cached_result("ambulance", "s0", *JAMSHEDPUR) is None
    assert get_cached_result("ambulance", "s1", *JAMSHEDPUR) == 1
    assert get_session_count() == 100
