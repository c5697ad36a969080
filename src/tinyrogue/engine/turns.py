from __future__ import annotations

import logging
from typing import Callable, Dict, List, Mapping, Optional, Set

from ..config import Difficulty, DifficultyProfile, Settings
from ..constants import HEALTH_CEILING, KILL_SCORE, POTION_HEAL
from ..dungeon.pathfinding import next_step
from ..dungeon.tiles import Grid, Position
from ..errors import SessionEndedError
from ..game.entities import Player
from ..game.level import build_level
from ..game.registry import EntityRegistry
from ..persistence.highscore import HighScoreRepository
from ..rng import RandomSource
from .commands import Command
from .events import EventKind, TurnEvent, TurnPhase, TurnResult
from .snapshot import GameSnapshot

logger = logging.getLogger(__name__)

Listener = Callable[[TurnEvent, "TurnResolver"], None]


class TurnResolver:
    """Owns one session's grid, entities and player and advances it a turn at a time.

    A turn is: apply the player's command, plan every live enemy's step against
    the positions all enemies held at the start of the phase, then resolve those
    plans in registry order with a reservation set so no two enemies end on the
    same tile. Earlier enemies win contested tiles.
    """

    def __init__(
        self,
        grid: Grid,
        registry: EntityRegistry,
        player: Player,
        profile: DifficultyProfile,
        rng: RandomSource,
        difficulty: Difficulty = Difficulty.NORMAL,
        high_scores: Optional[HighScoreRepository] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self.grid = grid
        self.registry = registry
        self.player = player
        self.profile = profile
        self.rng = rng
        self.difficulty = difficulty
        self.settings = settings or Settings()
        self.high_scores = high_scores
        self.high_score = high_scores.load() if high_scores is not None else 0
        self.score = 0
        self.turns = 0
        self.phase = TurnPhase.AWAITING_COMMAND
        self._listeners: List[Listener] = []
        self._events: List[TurnEvent] = []

    @classmethod
    def new_session(
        cls,
        settings: Settings,
        difficulty: Difficulty,
        rng: RandomSource,
        high_scores: Optional[HighScoreRepository] = None,
    ) -> "TurnResolver":
        """Generate a first map for ``difficulty`` and return a resolver ready for commands."""
        profile = settings.profile(difficulty)
        level = build_level(settings.map, profile, rng)
        player = Player(
            level.spawn[0],
            level.spawn[1],
            hp=settings.player.max_hp,
            max_hp=settings.player.max_hp,
            attack=settings.player.attack,
        )
        resolver = cls(
            level.grid,
            level.registry,
            player,
            profile,
            rng,
            difficulty=difficulty,
            high_scores=high_scores,
            settings=settings,
        )
        logger.info("New %s session, player at %s, high score %d", difficulty.label, player.pos, resolver.high_score)
        return resolver

    def regenerate_map(self) -> None:
        """Build a fresh level with the session difficulty and reset player stats and score."""
        level = build_level(self.settings.map, self.profile, self.rng)
        self.grid = level.grid
        self.registry = level.registry
        self.player = Player(
            level.spawn[0],
            level.spawn[1],
            hp=self.settings.player.max_hp,
            max_hp=self.settings.player.max_hp,
            attack=self.settings.player.attack,
        )
        self.score = 0
        logger.info("Regenerated map, player at %s", self.player.pos)

    # Listeners
    def add_listener(self, listener: Listener) -> None:
        """Subscribe to turn events as they happen."""
        self._listeners.append(listener)

    def _emit(self, kind: EventKind, amount: int = 0, detail: int = 0, position: Optional[Position] = None) -> None:
        event = TurnEvent(kind, amount=amount, detail=detail, position=position)
        self._events.append(event)
        for l in list(self._listeners):
            try:
                l(event, self)
            except Exception as ex:  # pragma: no cover - listeners shouldn't crash engine
                logger.exception("Listener errored on %s: %s", event, ex)

    @property
    def ended(self) -> bool:
        return self.phase is TurnPhase.SESSION_ENDED

    # Turn protocol
    def submit(self, command: Command) -> TurnResult:
        """Apply one command. Returns what happened and whether a turn was spent."""
        if self.ended:
            raise SessionEndedError("The session has ended; start a new one")
        self._events = []

        if command is Command.UNKNOWN:
            self._emit(EventKind.UNKNOWN_COMMAND)
            return TurnResult(consumed_turn=False, events=self._events)

        if command is Command.QUIT:
            self._emit(EventKind.QUIT)
            self._end_session()
            return TurnResult(consumed_turn=False, events=self._events, ended=True)

        dx, dy = command.delta  # type: ignore[misc]
        nx, ny = self.player.x + dx, self.player.y + dy
        if not self.grid.in_bounds(nx, ny):
            self._emit(EventKind.OUT_OF_BOUNDS, position=(nx, ny))
            return TurnResult(consumed_turn=False, events=self._events)

        self._apply_player_action(nx, ny)
        intents = self.plan_enemy_moves()
        self.resolve_enemy_moves(intents)
        self._end_turn()
        return TurnResult(consumed_turn=True, events=self._events, ended=self.ended)

    def _apply_player_action(self, nx: int, ny: int) -> None:
        self.turns += 1
        if not self.grid.is_floor(nx, ny):
            logger.debug("Player bumped into wall at (%d, %d)", nx, ny)
            self._emit(EventKind.WALL_BUMP, position=(nx, ny))
        else:
            eidx = self.registry.enemy_at(nx, ny)
            if eidx is not None:
                self._melee(eidx, nx, ny)
            else:
                iidx = self.registry.item_at(nx, ny)
                if iidx is not None:
                    roll = self.rng.randint(*POTION_HEAL)
                    self.registry.remove_item(iidx)
                    healed = self.player.heal(roll)
                    self._emit(EventKind.POTION_CONSUMED, amount=healed, detail=roll, position=(nx, ny))
                self.player.move_to(nx, ny)
                self._emit(EventKind.PLAYER_MOVED, position=(nx, ny))
        self.phase = TurnPhase.PLAYER_ACTION_APPLIED

    def _melee(self, eidx: int, nx: int, ny: int) -> None:
        damage = self.player.attack
        killed = self.registry.damage_enemy(eidx, damage)
        enemy = self.registry.enemies[eidx]
        self._emit(EventKind.PLAYER_HIT_ENEMY, amount=damage, detail=enemy.hp, position=(nx, ny))
        if killed:
            self.score += KILL_SCORE
            logger.info("Enemy %d defeated, score now %d", eidx, self.score)
            self._emit(EventKind.ENEMY_KILLED, amount=KILL_SCORE, position=(nx, ny))
            # Step into the vacated tile
            self.player.move_to(nx, ny)
            self._emit(EventKind.PLAYER_MOVED, position=(nx, ny))

    def plan_enemy_moves(self) -> Dict[int, Position]:
        """Intended next tile for every live enemy, keyed by registry index.

        Each enemy treats the current positions of the other live enemies as
        obstacles; no plan sees another enemy's planned tile.
        """
        target = self.player.pos
        intents: Dict[int, Position] = {}
        for idx, enemy in self.registry.live_enemies():
            occupied = self.registry.enemy_positions(exclude=idx)
            intents[idx] = next_step(self.grid, occupied, enemy.pos, target)
        self.phase = TurnPhase.ENEMIES_PLANNED
        return intents

    def resolve_enemy_moves(self, intents: Mapping[int, Position]) -> None:
        """Apply planned moves in registry order, then the shared-tile check."""
        reserved: Set[Position] = set()
        player_pos = self.player.pos
        live = list(self.registry.live_enemies())
        for n, (idx, enemy) in enumerate(live):
            # Tiles still held by enemies that resolve later
            pending = {e.pos for _, e in live[n + 1:]}
            intended = intents.get(idx)
            if intended is None:
                reserved.add(enemy.pos)
                continue
            if intended == player_pos:
                # Attack in place; the enemy never enters the player's tile
                damage = self._enemy_attack_roll()
                self.player.take_damage(damage)
                self._emit(EventKind.ENEMY_ATTACK, amount=damage, position=enemy.pos)
                reserved.add(enemy.pos)
            elif not self.grid.is_floor(*intended) or intended in reserved or intended in pending:
                reserved.add(enemy.pos)
            else:
                enemy.move_to(*intended)
                reserved.add(intended)

        # An enemy sharing the player's tile hits again, on top of any attack above
        for idx, enemy in self.registry.live_enemies():
            if enemy.pos == player_pos:
                damage = self._enemy_attack_roll()
                self.player.take_damage(damage)
                self._emit(EventKind.ENEMY_BUMP_ATTACK, amount=damage, position=enemy.pos)
        self.phase = TurnPhase.ENEMIES_RESOLVED

    def _enemy_attack_roll(self) -> int:
        return self.rng.randint(*self.profile.enemy_attack)

    def _end_turn(self) -> None:
        if self.player.hp > HEALTH_CEILING:
            self.player.hp = HEALTH_CEILING
        if self.player.hp <= 0:
            logger.info("Player died on turn %d with score %d", self.turns, self.score)
            self._emit(EventKind.PLAYER_DIED, amount=self.score)
            self._end_session()
        else:
            self.phase = TurnPhase.AWAITING_COMMAND

    def _end_session(self) -> None:
        self.phase = TurnPhase.SESSION_ENDED
        if self.score <= self.high_score:
            return
        saved = self.high_scores.save(self.score) if self.high_scores is not None else True
        self.high_score = self.score
        self._emit(EventKind.NEW_HIGH_SCORE, amount=self.score)
        if not saved:
            self._emit(EventKind.HIGH_SCORE_SAVE_FAILED, amount=self.score)

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            width=self.grid.width,
            height=self.grid.height,
            rows=tuple(self.grid.to_lines()),
            enemies=tuple(e.pos for _, e in self.registry.live_enemies()),
            items=tuple(self.registry.item_positions()),
            player=self.player.pos,
            hp=self.player.hp,
            max_hp=self.player.max_hp,
            attack=self.player.attack,
            score=self.score,
            turns=self.turns,
            high_score=self.high_score,
            difficulty=self.difficulty.label,
            ended=self.ended,
        )
