import pytest
from pydantic import ValidationError

from shinobi.components import Health

from shinobi.battle.actor import (
    Combatant,
    EnemyConfig,
    EnemyType,
    PlayerSnapshot,
    create_enemy,
    create_player,
)


def test_snapshot_defaults_to_full_resources():
    snap = PlayerSnapshot(id="p", name="Hero", max_hp=90, max_chakra=30)
    assert snap.current_hp == 90
    assert snap.current_chakra == 30


def test_snapshot_clamps_current_values():
    snap = PlayerSnapshot(id="p", name="Hero", max_hp=90, current_hp=500, current_chakra=-3)
    assert snap.current_hp == 90
    assert snap.current_chakra == 0


@pytest.mark.parametrize("field,value", [
    ("max_hp", 0),
    ("strength", -1),
    ("defense", -1),
    ("level", 0),
])
def test_snapshot_rejects_invalid_stats(field, value):
    with pytest.raises(ValidationError):
        PlayerSnapshot(id="p", name="Hero", **{field: value})


def test_enemy_config_rejects_invalid_stats():
    with pytest.raises(ValidationError):
        EnemyConfig(id="e", name="Bad", max_hp=0, attack_power=5)
    with pytest.raises(ValidationError):
        EnemyConfig(id="e", name="Bad", max_hp=10, attack_power=-5)


def test_player_from_snapshot(player_snapshot):
    player = create_player(player_snapshot)

    assert player.id == "player_001"
    assert player.attack_stat == 12
    assert player.defense_stat == 6
    assert player.current_hp == 100
    assert player.current_chakra == 50
    assert player.level == 1
    assert player.is_alive
    assert not player.is_defending


def test_player_does_not_share_state_with_snapshot(player_snapshot):
    player = create_player(player_snapshot)
    player.take_damage(30)
    player.known_jutsu.append("Fireball")

    assert player_snapshot.current_hp == 100
    assert player_snapshot.known_jutsu == []


def test_player_to_snapshot_reflects_battle_state(player_snapshot):
    player = create_player(player_snapshot)
    player.take_damage(25)

    snap = player.to_snapshot()

    assert snap.current_hp == 75
    assert snap.strength == 12
    assert snap.model_dump()["current_hp"] == 75


def test_enemy_from_config(enemy_config):
    enemy = create_enemy(enemy_config)

    assert enemy.attack_stat == 10
    assert enemy.defense_stat == 4
    assert enemy.current_hp == 80
    assert enemy.enemy_type is EnemyType.WEAK


def test_hp_fraction_and_death(enemy_config):
    enemy = create_enemy(enemy_config)

    enemy.take_damage(60)
    assert enemy.hp_fraction == 0.25

    enemy.take_damage(100)
    assert enemy.current_hp == 0
    assert not enemy.is_alive


def test_defend_flag(enemy_config):
    enemy = create_enemy(enemy_config)
    enemy.start_defend()
    assert enemy.is_defending
    enemy.end_defend()
    assert not enemy.is_defending


def test_combatant_requires_attack_stat():
    with pytest.raises(TypeError):
        Combatant(id="c", name="Nobody", health=Health())
