import pytest

from towercomb.animation import FRAME_DURATION
from towercomb.enemies import (
    EnemyKind,
    PhysicsLayer,
    ShowDelay,
    basic_trooper,
    chonkus_trooper,
    turbo_trooper,
)

ALL = [basic_trooper, chonkus_trooper, turbo_trooper]


def _all_specs():
    return [basic_trooper(), chonkus_trooper(), turbo_trooper()]


def test_names():
    assert basic_trooper().name == "Minor Trooper"
    assert chonkus_trooper().name == "Major Trooper"
    assert turbo_trooper().name == "Turbo Trooper"


def test_kinds_distinct():
    kinds = {basic_trooper().kind, chonkus_trooper().kind, turbo_trooper().kind}
    assert kinds == set(EnemyKind)


def test_speed_ordering():
    assert turbo_trooper().speed > basic_trooper().speed > chonkus_trooper().speed


def test_bounty_ordering():
    assert chonkus_trooper().bounty > turbo_trooper().bounty > basic_trooper().bounty


def test_size_ordering():
    chonk, basic, turbo = chonkus_trooper(), basic_trooper(), turbo_trooper()
    assert chonk.size[0] > basic.size[0] > turbo.size[0]
    assert chonk.sprite_size > basic.sprite_size > turbo.sprite_size


def test_damage_multipliers():
    assert chonkus_trooper().damage_multiplier_all < basic_trooper().damage_multiplier_all
    assert turbo_trooper().damage_multiplier_all > basic_trooper().damage_multiplier_all
    assert basic_trooper().damage_multiplier_all == 1.0


@pytest.mark.parametrize("make", ALL)
def test_shared_health(make):
    assert make().health == basic_trooper().health


def test_enemy_collision_layers():
    for spec in _all_specs():
        assert spec.membership is PhysicsLayer.ENEMY
        assert spec.collides_with(PhysicsLayer.LEVEL)
        assert spec.collides_with(PhysicsLayer.PROJECTILES)
        assert not spec.collides_with(PhysicsLayer.ENEMY)
        assert not spec.collides_with(PhysicsLayer.ETHEREAL)


def test_animation_plays_spec_frames():
    for spec in _all_specs():
        queue = spec.animation()
        shown = [queue.tick(FRAME_DURATION) for _ in spec.frames]
        assert tuple(shown) == spec.frames


def test_animation_is_fresh_each_time():
    spec = basic_trooper()
    first = spec.animation()
    first.tick(FRAME_DURATION)
    assert spec.animation().current_index == 0
    assert first.current_index == 1


def test_layer_masks_are_distinct_bits():
    layers = [PhysicsLayer(layer.value) for layer in PhysicsLayer]
    masks = [layer.mask for layer in layers]
    assert PhysicsLayer.DEFAULT.mask == 1
    assert len(set(masks)) == len(masks)
    assert all(mask & (mask - 1) == 0 for mask in masks)


def test_show_delay_reveals_once():
    delay = ShowDelay()
    assert delay.tick(0.004) is False
    assert delay.visible is False
    assert delay.tick(0.01) is True
    assert delay.visible is True
    assert delay.tick(0.01) is False
    assert delay.visible is True


def test_specs_are_immutable():
    spec = basic_trooper()
    with pytest.raises(AttributeError):
        spec.speed = 99.0  # type: ignore[misc]
    assert spec.speed == 30.0