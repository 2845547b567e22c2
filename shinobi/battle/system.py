"""
Battle system - turn-based combat controller.

One BattleState holds one player and one enemy. Each call to
BattleEngine.submit_player_action resolves a full round: the player's
action first, then (if the enemy still stands) the enemy AI's response.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from shinobi.core.events import EventBus
from shinobi.battle.actor import (
    Combatant,
    Enemy,
    EnemyConfig,
    EnemyType,
    Player,
    PlayerSnapshot,
    create_enemy,
    create_player,
)
from shinobi.battle.actions import ActionKind, resolve_attack, resolve_defend
from shinobi.battle.ai import EnemyAI
from shinobi.battle.config import BattleConfig
from shinobi.battle.errors import InvalidStateError, InvariantViolation

logger = logging.getLogger(__name__)


class BattlePhase(Enum):
    """Position of a battle in its state machine."""
    AWAITING_PLAYER_ACTION = "awaiting_player_action"
    RESOLVING_ROUND = "resolving_round"
    PLAYER_VICTORY = "player_victory"
    ENEMY_VICTORY = "enemy_victory"

    @property
    def is_terminal(self) -> bool:
        return self in (BattlePhase.PLAYER_VICTORY, BattlePhase.ENEMY_VICTORY)


class BattleEvent(Enum):
    """Battle events published on the EventBus."""
    BATTLE_STARTED = auto()   # state
    ACTION_RESOLVED = auto()  # state, entry
    ROUND_COMPLETED = auto()  # state, turn_number, snapshot
    BATTLE_ENDED = auto()     # state, phase, winner, rewards, snapshot


@dataclass(frozen=True)
class BattleLogEntry:
    """One line of battle history."""
    turn_number: int
    actor_id: str
    actor_name: str
    action: Optional[ActionKind]  # None for the closing victory entry
    description: str
    damage: int = 0

    @property
    def line(self) -> str:
        return f"[Round {self.turn_number}] {self.description}"


@dataclass(frozen=True)
class BattleRewards:
    """Rewards from winning a battle."""
    exp: int
    enemy_id: str
    enemy_type: EnemyType


class BattleState:
    """
    State of a single battle.

    Read freely; only BattleEngine mutates it.
    """

    def __init__(self, player: Player, enemy: Enemy):
        self._player = player
        self._enemy = enemy
        self._entries: list[BattleLogEntry] = []
        self._turn_number = 1
        self._phase = BattlePhase.AWAITING_PLAYER_ACTION
        self._rewards: Optional[BattleRewards] = None

    @property
    def player(self) -> Player:
        return self._player

    @property
    def enemy(self) -> Enemy:
        return self._enemy

    @property
    def phase(self) -> BattlePhase:
        return self._phase

    @property
    def turn_number(self) -> int:
        return self._turn_number

    @property
    def log(self) -> tuple[BattleLogEntry, ...]:
        """Battle history in insertion order."""
        return tuple(self._entries)

    @property
    def rewards(self) -> Optional[BattleRewards]:
        return self._rewards

    @property
    def is_over(self) -> bool:
        return self._phase.is_terminal

    @property
    def winner(self) -> Optional[str]:
        """Name of the winner, or None while the battle is ongoing."""
        if self._phase is BattlePhase.PLAYER_VICTORY:
            return self._player.name
        if self._phase is BattlePhase.ENEMY_VICTORY:
            return self._enemy.name
        return None

    @property
    def status_text(self) -> str:
        if self.is_over:
            return f"Battle Over! Winner: {self.winner}"
        if self._phase is BattlePhase.RESOLVING_ROUND:
            return "Resolving..."
        return "Your Turn"

    @property
    def latest_entry(self) -> Optional[BattleLogEntry]:
        return self._entries[-1] if self._entries else None

    def log_lines(self) -> list[str]:
        """Battle log formatted for display."""
        return [entry.line for entry in self._entries]

    def player_snapshot(self) -> PlayerSnapshot:
        """Plain-data copy of the player for persistence."""
        return self._player.to_snapshot()

    def _append(self, entry: BattleLogEntry) -> None:
        self._entries.append(entry)


class BattleEngine:
    """
    Turn-based battle controller.

    Manages:
    - Battle creation from snapshots
    - Round resolution (player first, then enemy)
    - Defend flags
    - Win/lose detection and rewards
    - Battle log and event publication

    Usage:
        engine = BattleEngine(seed=42)
        state = engine.create_battle(player_snapshot, enemy_config)
        while not state.is_over:
            engine.submit_player_action(state, ActionKind.ATTACK)
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
        config: Optional[BattleConfig] = None,
        ai: Optional[EnemyAI] = None,
        events: Optional[EventBus] = None,
    ):
        self.rng = rng if rng is not None else random.Random(seed)
        self.config = config or BattleConfig()
        self.ai = ai or EnemyAI(self.config)
        self.events = events

    def create_battle(self, player: PlayerSnapshot, enemy: EnemyConfig) -> BattleState:
        """
        Start a battle.

        Args:
            player: Player data; copied, never written back
            enemy: Enemy data; the enemy starts at full HP

        Returns:
            A state awaiting the player's first action
        """
        state = BattleState(create_player(player), create_enemy(enemy))
        if not state.player.is_alive:
            raise ValueError(f"{player.name} cannot start a battle at 0 HP")

        logger.info(
            "Battle started: %s (%d/%d HP) vs %s (%d/%d HP)",
            state.player.name, state.player.current_hp, state.player.max_hp,
            state.enemy.name, state.enemy.current_hp, state.enemy.max_hp,
        )
        self._publish(BattleEvent.BATTLE_STARTED, state=state)
        return state

    def submit_player_action(self, state: BattleState, action: ActionKind) -> BattleState:
        """
        Resolve one round.

        Args:
            state: Battle awaiting the player's action
            action: The player's choice

        Returns:
            The same state, advanced by one round

        Raises:
            InvalidStateError: If the battle is over or mid-resolution
            InvariantViolation: If HP leaves its bounds. The state stays in
                RESOLVING_ROUND and accepts no further actions.
            ValueError: If action is not an ActionKind
        """
        if not isinstance(action, ActionKind):
            raise ValueError(f"Unknown battle action: {action!r}")
        if state.phase is not BattlePhase.AWAITING_PLAYER_ACTION:
            raise InvalidStateError(
                f"Cannot act during {state.phase.value} (round {state.turn_number})"
            )

        state._phase = BattlePhase.RESOLVING_ROUND
        player, enemy = state.player, state.enemy
        absorbed: list[Combatant] = []

        # Player's turn
        player.end_defend()
        if self._take_action(state, player, enemy, action, absorbed):
            self._finish(state, BattlePhase.PLAYER_VICTORY, absorbed)
            return state

        # Enemy's turn. Its stance lasted through the player's action, so
        # both flags may have been set until here.
        enemy.end_defend()
        enemy_action = self.ai.choose_action(enemy, self.rng)
        if self._take_action(state, enemy, player, enemy_action, absorbed):
            self._finish(state, BattlePhase.ENEMY_VICTORY, absorbed)
            return state

        for combatant in absorbed:
            combatant.end_defend()
        self._check_bounds(state)

        state._turn_number += 1
        state._phase = BattlePhase.AWAITING_PLAYER_ACTION
        logger.debug(
            "Round complete: %s %d/%d HP, %s %d/%d HP",
            player.name, player.current_hp, player.max_hp,
            enemy.name, enemy.current_hp, enemy.max_hp,
        )
        self._publish(
            BattleEvent.ROUND_COMPLETED,
            state=state,
            turn_number=state.turn_number,
            snapshot=state.player_snapshot(),
        )
        return state

    def _take_action(
        self,
        state: BattleState,
        actor: Combatant,
        target: Combatant,
        action: ActionKind,
        absorbed: list[Combatant],
    ) -> bool:
        """Resolve one combatant's action. Returns True if the target fell."""
        if action is ActionKind.ATTACK:
            result = resolve_attack(actor, target, self.rng, self.config)
            if result.defended:
                absorbed.append(target)
            self._record(state, actor, action, result.description, result.damage)
            return not target.is_alive

        self._record(state, actor, action, resolve_defend(actor))
        return False

    def _record(
        self,
        state: BattleState,
        actor: Combatant,
        action: Optional[ActionKind],
        description: str,
        damage: int = 0,
    ) -> BattleLogEntry:
        entry = BattleLogEntry(
            turn_number=state.turn_number,
            actor_id=actor.id,
            actor_name=actor.name,
            action=action,
            description=description,
            damage=damage,
        )
        state._append(entry)
        self._publish(BattleEvent.ACTION_RESOLVED, state=state, entry=entry)
        return entry

    def _finish(
        self,
        state: BattleState,
        phase: BattlePhase,
        absorbed: list[Combatant],
    ) -> None:
        """Move into a terminal phase and write the closing entry."""
        for combatant in absorbed:
            combatant.end_defend()
        self._check_bounds(state)

        if phase is BattlePhase.PLAYER_VICTORY:
            winner, loser = state.player, state.enemy
            state._rewards = self._roll_rewards(state.enemy)
            description = (
                f"{loser.name} has been defeated! Gained {state._rewards.exp} XP!"
            )
        else:
            winner, loser = state.enemy, state.player
            description = f"{loser.name} has been defeated!"

        state._phase = phase
        self._record(state, winner, None, description)

        logger.info("Battle over after %d round(s): %s wins", state.turn_number, winner.name)
        self._publish(
            BattleEvent.BATTLE_ENDED,
            state=state,
            phase=phase,
            winner=winner.name,
            rewards=state.rewards,
            snapshot=state.player_snapshot(),
        )

    def _roll_rewards(self, enemy: Enemy) -> BattleRewards:
        formula = self.config.exp_reward_for(enemy.enemy_type)
        roll = self.rng.randint(0, self.config.exp_roll_max)
        return BattleRewards(
            exp=formula.base + formula.step * roll,
            enemy_id=enemy.id,
            enemy_type=enemy.enemy_type,
        )

    def _check_bounds(self, state: BattleState) -> None:
        for combatant in (state.player, state.enemy):
            if not 0 <= combatant.current_hp <= combatant.max_hp:
                raise InvariantViolation(
                    f"{combatant.name} HP out of bounds: "
                    f"{combatant.current_hp}/{combatant.max_hp}"
                )

    def _publish(self, event_type: BattleEvent, **data) -> None:
        if self.events is not None:
            self.events.publish(event_type, **data)
