"""Turn engine: setup, action dispatch, round progression and final scoring."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import cast

from . import bases, battlefield, economy, roster
from .actions import Action, BuildBase, Deploy, Harvest, Quit, Train
from .enums import ActionKind, GamePhase
from .errors import ActionRejected, GameOverError, NotPlayersTurn, PlayerInactive
from .models import GameResult, GameState, Player, PlayerID, PlayerSnapshot
from .rules_config import DEFAULT_RULES, RulesConfig

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ActionOutcome:
    """Result of submitting an action.

    ``snapshot`` reflects the acting player after the action, whether or not
    it was accepted.  ``error`` carries the rejection when ``accepted`` is
    false.
    """

    accepted: bool
    detail: str
    snapshot: PlayerSnapshot
    error: ActionRejected | None = None


ActionHandler = Callable[[GameState, Player, Action, RulesConfig], str]


def new_game(
    player_names: Sequence[str],
    rounds: int | None = None,
    *,
    rules: RulesConfig = DEFAULT_RULES,
) -> GameState:
    """Create a fresh match for the given players."""

    if rounds is None:
        rounds = rules.game.default_rounds
    if rounds < 1:
        raise ValueError("a game needs at least one round")

    names = [name.strip() for name in player_names]
    if len(names) != rules.game.player_count:
        raise ValueError(f"exactly {rules.game.player_count} players are required")
    if any(not name for name in names):
        raise ValueError("player names must not be blank")
    if len(set(names)) != len(names):
        raise ValueError("player with this name already exists")

    players = [Player(id=PlayerID(index), nick=name) for index, name in enumerate(names)]
    logger.debug("new game: players=%s rounds=%d", names, rounds)
    return GameState(players=players, total_rounds=rounds)


def current_player(state: GameState) -> Player:
    return state.players[state.current_index]


def apply_action(
    state: GameState,
    action: Action,
    *,
    player_id: PlayerID | None = None,
    rules: RulesConfig = DEFAULT_RULES,
) -> ActionOutcome:
    """Apply ``action`` for the player whose turn it is.

    A rejected action leaves the state untouched and the same player keeps
    the turn.  An accepted action passes the turn on, advancing the round and
    finishing the game when appropriate.
    """

    if state.phase is GamePhase.ENDED:
        raise GameOverError("the game has already ended")

    actor = current_player(state)
    try:
        if player_id is not None and player_id != actor.id:
            requested = state.player(player_id)
            if not requested.active:
                raise PlayerInactive(requested.nick)
            raise NotPlayersTurn(requested.nick, actor.nick)

        handler = _ACTION_HANDLERS[action.kind]
        detail = handler(state, actor, action, rules)
    except ActionRejected as exc:
        logger.info(
            "round %d: %s rejected '%s': %s", state.current_round, actor.nick, action, exc
        )
        return ActionOutcome(
            accepted=False,
            detail=str(exc),
            snapshot=snapshot(state, actor.id, rules=rules),
            error=exc,
        )

    logger.debug("round %d: %s -> %s", state.current_round, actor.nick, action)
    outcome = ActionOutcome(
        accepted=True,
        detail=detail,
        snapshot=snapshot(state, actor.id, rules=rules),
    )
    _advance_turn(state, rules)
    return outcome


def end_game(state: GameState, *, rules: RulesConfig = DEFAULT_RULES) -> GameResult:
    """Resolve the battlefield now if the game is still running."""

    if state.result is None:
        return _finish(state, rules)
    return state.result


def snapshot(
    state: GameState, player_id: PlayerID, *, rules: RulesConfig = DEFAULT_RULES
) -> PlayerSnapshot:
    """Build a read-only view of one player."""

    player = state.player(player_id)
    field = state.battlefield
    return PlayerSnapshot(
        player_id=player.id,
        nick=player.nick,
        wood=player.balance.wood,
        gold=player.balance.gold,
        bases=bases.base_count(player),
        capacity=bases.capacity(player, rules=rules),
        units_in_use=roster.units_in_use(player, field, rules=rules),
        roster=dict(player.roster),
        committed=field.counts(player.id),
        strength=battlefield.total_strength(field, player.id, rules=rules),
        active=player.active,
    )


# ---------------------------------------------------------------------------
# Round progression


def _advance_turn(state: GameState, rules: RulesConfig) -> None:
    if not state.active_players:
        _finish(state, rules)
        return

    index = state.current_index
    while True:
        index += 1
        if index >= len(state.players):
            index = 0
            quit_stops_game = state.quit_this_round and rules.game.quit_ends_game_after_round
            if state.current_round >= state.total_rounds or quit_stops_game:
                _finish(state, rules)
                return
            state.current_round += 1
            state.quit_this_round = False
        if state.players[index].active:
            state.current_index = index
            return


def _finish(state: GameState, rules: RulesConfig) -> GameResult:
    player_ids = [player.id for player in state.players]
    result = battlefield.resolve(state.battlefield, player_ids, rules=rules)
    state.result = result
    state.phase = GamePhase.ENDED
    if result.is_draw:
        logger.info("game over after round %d: draw", state.current_round)
    else:
        logger.info(
            "game over after round %d: %s wins",
            state.current_round,
            state.player(result.winner).nick,
        )
    return result


# ---------------------------------------------------------------------------
# Registered action handlers


def _handle_harvest(state: GameState, player: Player, action: Action, rules: RulesConfig) -> str:
    wood, gold = economy.harvest(player, rules=rules)
    return (
        f"harvest was a success; gained {wood} wood and {gold} gold "
        f"(warehouse: {player.balance.wood} wood, {player.balance.gold} gold)"
    )


def _handle_build_base(
    state: GameState, player: Player, action: Action, rules: RulesConfig
) -> str:
    count = bases.build_base(player, rules=rules)
    plural = "" if count == 1 else "s"
    return f"base built; you now have {count} base{plural}"


def _handle_train(state: GameState, player: Player, action: Action, rules: RulesConfig) -> str:
    order = cast(Train, action)
    roster.train(
        player, order.unit_type, order.count, battlefield=state.battlefield, rules=rules
    )
    return f"training of {order.count} {order.unit_type} unit(s) was successful"


def _handle_deploy(state: GameState, player: Player, action: Action, rules: RulesConfig) -> str:
    order = cast(Deploy, action)
    committed = battlefield.deploy(
        player, order.unit_type, order.count, battlefield=state.battlefield
    )
    return (
        f"{order.count} {order.unit_type} unit(s) sent to the battlefield "
        f"({committed} committed)"
    )


def _handle_quit(state: GameState, player: Player, action: Action, rules: RulesConfig) -> str:
    player.active = False
    state.quit_this_round = True
    return f"{player.nick} has left the game"


_ACTION_HANDLERS: dict[ActionKind, ActionHandler] = {
    Harvest.kind: _handle_harvest,
    BuildBase.kind: _handle_build_base,
    Train.kind: _handle_train,
    Deploy.kind: _handle_deploy,
    Quit.kind: _handle_quit,
}
