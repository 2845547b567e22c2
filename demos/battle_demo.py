"""
Battle Demo: Shinobi battle engine

Demonstrates:
- Creating a player snapshot and a preset enemy
- Resolving rounds until one side falls
- Reading the battle log and status line
- Listening to battle events
- Awarding experience after a victory

Usage:
    python demos/battle_demo.py --seed 7 --enemy strong
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from shinobi.core import EventBus
from shinobi.battle import (
    ActionKind,
    BattleEngine,
    BattleEvent,
    EnemyType,
    PlayerSnapshot,
    create_enemy_config,
)
from shinobi.progression import award_experience, starting_jutsu


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Run a seeded text battle.")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--enemy",
        choices=[t.value for t in EnemyType],
        default=EnemyType.WEAK.value,
        help="Enemy tier",
    )
    parser.add_argument("--max-rounds", type=int, default=50)
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    events = EventBus()
    events.subscribe(
        BattleEvent.ROUND_COMPLETED,
        lambda e: print(f"  -- end of round, {e['snapshot'].current_hp} HP left"),
    )

    engine = BattleEngine(seed=args.seed, events=events)
    player = PlayerSnapshot(
        id="player_001",
        name="Naruto",
        max_hp=100,
        max_chakra=50,
        strength=12,
        defense=6,
        known_jutsu=starting_jutsu(),
    )
    enemy = create_enemy_config(EnemyType(args.enemy), id="enemy_001", name="Bandit")
    state = engine.create_battle(player, enemy)

    print(f"Battle started: {player.name} vs {enemy.name} ({enemy.enemy_type.value})")

    rounds = 0
    while not state.is_over and rounds < args.max_rounds:
        rounds += 1
        # Alternate attack and defend like a cautious player
        action = ActionKind.ATTACK if rounds % 3 else ActionKind.DEFEND
        engine.submit_player_action(state, action)

    print("\nBattle Log:")
    for line in state.log_lines():
        print(f"  {line}")
    print(f"\n{state.status_text}")

    if state.rewards:
        result = award_experience(state.player_snapshot(), state.rewards.exp)
        print(result.summary)

    return 0


if __name__ == "__main__":
    sys.exit(main())
