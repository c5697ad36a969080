from __future__ import annotations

from typing import List

from ..engine.events import EventKind, TurnEvent
from ..engine.snapshot import GameSnapshot

PLAYER_GLYPH = "@"
ENEMY_GLYPH = "E"
POTION_GLYPH = "!"

HEADER = (
    "=== Tiny Roguelike ===\n"
    "Controls: w=up a=left s=down d=right    q=quit\n"
    "Objective: survive, kill enemies (score +10 per kill), pick potions '!' to heal.\n"
)


def render(snapshot: GameSnapshot) -> str:
    """Draw the map and HUD; potions under enemies are hidden, the player is drawn last."""
    canvas: List[List[str]] = [list(row) for row in snapshot.rows]
    for x, y in snapshot.items:
        canvas[y][x] = POTION_GLYPH
    for x, y in snapshot.enemies:
        canvas[y][x] = ENEMY_GLYPH
    px, py = snapshot.player
    canvas[py][px] = PLAYER_GLYPH

    hud = (
        f"Diff: {snapshot.difficulty}    HP: {snapshot.hp}/{snapshot.max_hp}"
        f"    Score: {snapshot.score}    Turns: {snapshot.turns}    High: {snapshot.high_score}"
    )
    body = "\n".join("".join(row) for row in canvas)
    return f"{HEADER}\n{hud}\n\n{body}\n"


def format_event(event: TurnEvent) -> str:
    kind = event.kind
    if kind is EventKind.UNKNOWN_COMMAND:
        return "Unknown input. Use w/a/s/d."
    if kind is EventKind.OUT_OF_BOUNDS:
        return "Cannot move out of bounds."
    if kind is EventKind.WALL_BUMP:
        return "Bumped into a wall."
    if kind is EventKind.PLAYER_HIT_ENEMY:
        if event.detail > 0:
            return f"You attack the enemy for {event.amount} damage! Enemy HP left: {event.detail}"
        return f"You attack the enemy for {event.amount} damage!"
    if kind is EventKind.ENEMY_KILLED:
        return f"Enemy defeated! +{event.amount} score."
    if kind is EventKind.POTION_CONSUMED:
        return f"Picked up a potion! Healed {event.amount} HP (+{event.detail} roll, capped)."
    if kind is EventKind.ENEMY_ATTACK:
        return f"An enemy attacks you for {event.amount} damage!"
    if kind is EventKind.ENEMY_BUMP_ATTACK:
        return f"An enemy hits you for {event.amount} damage (bumped into you)!"
    if kind is EventKind.PLAYER_DIED:
        return f"You died! Final score: {event.amount}"
    if kind is EventKind.QUIT:
        return "Quitting."
    if kind is EventKind.NEW_HIGH_SCORE:
        return f"New high score: {event.amount}!"
    if kind is EventKind.HIGH_SCORE_SAVE_FAILED:
        return "Warning: could not write high score."
    # PLAYER_MOVED and anything silent
    return ""
