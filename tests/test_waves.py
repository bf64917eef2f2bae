import pytest
from hypothesis import given, strategies as st

from towercomb import waves
from towercomb.enemies import basic_trooper, chonkus_trooper, turbo_trooper
from towercomb.waves import Group, Wave, WaveManager, make_wave, waves_for_level


def _loaded_manager():
    manager = WaveManager()
    manager.load(waves.test_waves())
    return manager


def test_default_waves_count():
    assert len(waves.test_waves()) == 4


def test_default_first_wave_delays():
    first = waves.test_waves()[0]
    assert [delay for _, delay in first.groups] == [2.0, 0.0]
    assert first.groups[1][0].enemies == (basic_trooper(), turbo_trooper())


def test_make_wave_rejects_negative_delay():
    with pytest.raises(ValueError):
        make_wave([([basic_trooper()], -1.0)])


def test_new_manager_is_idle():
    manager = WaveManager()
    assert manager.remaining_waves() == 0
    assert manager.current_wave is None
    assert manager.wave_timer.duration == waves.INITIAL_WAVE_DELAY


def test_start_next_wave_pops_one():
    manager = _loaded_manager()
    before = manager.remaining_waves()
    assert manager.start_next_wave() is False
    assert manager.remaining_waves() == before - 1
    assert manager.wave_active


def test_start_while_running_keeps_queue():
    manager = _loaded_manager()
    manager.start_next_wave()
    running = manager.current_wave
    remaining = manager.remaining_waves()
    assert manager.start_next_wave() is False
    assert manager.current_wave is running
    assert manager.remaining_waves() == remaining


def test_start_with_nothing_left_requests_next_level():
    assert WaveManager().start_next_wave() is True


def test_nothing_spawns_without_running_wave():
    manager = _loaded_manager()
    assert manager.tick(5.0) is None


def test_first_group_waits_for_initial_delay():
    manager = _loaded_manager()
    manager.start_next_wave()
    assert manager.tick(0.5) is None
    group = manager.tick(0.5)
    assert group == Group((basic_trooper(),))
    assert manager.wave_timer.duration == 2.0
    assert not manager.wave_timer.finished


def test_wave_ends_after_last_group():
    manager = WaveManager()
    manager.load([make_wave([([chonkus_trooper()], 0.0)])])
    manager.start_next_wave()
    assert manager.tick(1.0) == Group((chonkus_trooper(),))
    assert manager.tick(0.0) is None
    assert manager.current_wave is None
    assert manager.start_next_wave() is True


def test_load_does_not_mutate_source():
    source = [make_wave([([basic_trooper()], 0.0)])]
    manager = WaveManager()
    manager.load(source)
    manager.start_next_wave()
    manager.tick(1.0)
    assert len(source[0]) == 1


def test_button_frames_when_idle():
    manager = WaveManager()
    assert manager.button_frame("out") == 0
    assert manager.button_frame("over") == 2
    assert manager.button_frame("pressed") == 1
    assert manager.button_frame("released") == 3


@pytest.mark.parametrize("pointer", ["out", "over", "pressed", "released"])
def test_button_frame_busy(pointer):
    manager = _loaded_manager()
    manager.start_next_wave()
    assert manager.button_frame(pointer) == waves.BUSY_FRAME


def test_button_frame_unknown_pointer():
    with pytest.raises(ValueError):
        WaveManager().button_frame("hover")


def test_waves_for_level_falls_back_to_default():
    assert waves_for_level([], 0) == waves.test_waves()
    assert waves_for_level([[Wave()]], -1) == waves.test_waves()


def test_waves_for_level_copies():
    level = [make_wave([([turbo_trooper()], 0.5)])]
    result = waves_for_level([level], 0)
    result[0].groups.popleft()
    assert len(level[0]) == 1
    assert len(result) == 1


@given(st.lists(st.floats(min_value=0.0, max_value=5.0), min_size=1, max_size=8))
def test_all_groups_spawn_in_order(delays):
    groups = [([basic_trooper()] * (i + 1), delay) for i, delay in enumerate(delays)]
    manager = WaveManager()
    manager.load([make_wave(groups)])
    manager.start_next_wave()
    spawned = []
    for _ in range(len(delays) + 2):
        group = manager.tick(10.0)
        if group is not None:
            spawned.append(len(group))
    assert spawned == list(range(1, len(delays) + 1))
    assert manager.current_wave is None