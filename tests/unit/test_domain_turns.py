"""Tests for the turn engine: setup, dispatch, round flow and scoring."""

from __future__ import annotations

import pytest

from wartycoon.domain import models as dm
from wartycoon.domain import turns
from wartycoon.domain.actions import BuildBase, Deploy, Harvest, Quit, Train
from wartycoon.domain.enums import GamePhase, ResourceType, UnitType
from wartycoon.domain.errors import (
    GameOverError,
    InsufficientResources,
    InsufficientTrainedUnits,
    NoActiveBase,
    NotPlayersTurn,
    PlayerInactive,
)
from wartycoon.domain.rules_config import GameRules, RulesConfig

ALICE = dm.PlayerID(0)
BOB = dm.PlayerID(1)


def _game(rounds: int = 10) -> dm.GameState:
    return turns.new_game(["Alice", "Bob"], rounds)


def _accept(state: dm.GameState, *actions, rules: RulesConfig | None = None) -> None:
    for action in actions:
        kwargs = {"rules": rules} if rules is not None else {}
        outcome = turns.apply_action(state, action, **kwargs)
        assert outcome.accepted, outcome.detail


def test_new_game_starts_with_first_player_in_round_one():
    state = _game(rounds=12)
    assert [p.nick for p in state.players] == ["Alice", "Bob"]
    assert state.total_rounds == 12
    assert state.current_round == 1
    assert turns.current_player(state).id == ALICE
    assert state.phase is GamePhase.AWAITING_ACTION


def test_new_game_defaults_to_configured_rounds():
    assert turns.new_game(["Alice", "Bob"]).total_rounds == 10


@pytest.mark.parametrize(
    ("names", "rounds"),
    [
        (["Alice"], 10),
        (["Alice", "Bob", "Carol"], 10),
        (["Alice", "Alice"], 10),
        (["Alice", "  "], 10),
        (["Alice", "Bob"], 0),
    ],
)
def test_new_game_rejects_bad_setup(names, rounds):
    with pytest.raises(ValueError):
        turns.new_game(names, rounds)


def test_accepted_action_passes_the_turn():
    state = _game()
    outcome = turns.apply_action(state, Harvest())

    assert outcome.accepted
    assert outcome.error is None
    assert outcome.snapshot.player_id == ALICE
    assert (outcome.snapshot.wood, outcome.snapshot.gold) == (200, 120)
    assert turns.current_player(state).id == BOB
    assert state.current_round == 1

    _accept(state, Harvest())
    assert turns.current_player(state).id == ALICE
    assert state.current_round == 2


def test_rejected_action_keeps_turn_and_state():
    state = _game()
    outcome = turns.apply_action(state, BuildBase())

    assert not outcome.accepted
    assert isinstance(outcome.error, InsufficientResources)
    assert turns.current_player(state).id == ALICE
    assert state.current_round == 1
    assert state.player(ALICE).bases == 0


def test_economy_scenario():
    state = _game()

    _accept(state, Harvest(), Harvest())
    outcome = turns.apply_action(state, BuildBase())
    assert not outcome.accepted
    assert outcome.error.resource is ResourceType.WOOD
    assert outcome.error.needed == 220

    _accept(state, Harvest(), Harvest())
    alice = state.player(ALICE)
    assert (alice.balance.wood, alice.balance.gold) == (400, 240)

    _accept(state, BuildBase(), Harvest())
    assert (alice.balance.wood, alice.balance.gold) == (180, 140)
    assert alice.bases == 1

    outcome = turns.apply_action(state, Train(UnitType.ARCHER, 18))
    assert not outcome.accepted
    assert outcome.error.resource is ResourceType.GOLD
    assert (outcome.error.needed, outcome.error.available) == (180, 140)
    assert alice.balance.gold == 140

    outcome = turns.apply_action(state, Train(UnitType.ARCHER, 14))
    assert outcome.accepted
    assert alice.balance.gold == 0
    assert outcome.snapshot.roster[UnitType.ARCHER] == 14
    assert outcome.snapshot.units_in_use == 14
    assert outcome.snapshot.capacity == 200


def test_train_without_base_reports_no_active_base():
    state = _game()
    _accept(state, Harvest(), Harvest())
    outcome = turns.apply_action(state, Train(UnitType.ARCHER, 1))
    assert isinstance(outcome.error, NoActiveBase)


def test_deploy_more_than_trained_is_rejected():
    state = _game()
    outcome = turns.apply_action(state, Deploy(UnitType.WARRIOR, 1))
    assert isinstance(outcome.error, InsufficientTrainedUnits)
    assert turns.current_player(state).id == ALICE


def _armies_game(rounds: int) -> dm.GameState:
    """Play four rounds so Alice holds 10 archers and Bob 16 warriors."""

    state = _game(rounds)
    _accept(state, Harvest(), Harvest())
    _accept(state, Harvest(), Harvest())
    _accept(state, BuildBase(), BuildBase())
    _accept(state, Train(UnitType.ARCHER, 10), Train(UnitType.WARRIOR, 16))
    return state


def test_train_then_deploy_keeps_resources():
    state = _armies_game(rounds=10)
    alice = state.player(ALICE)
    before = (alice.balance.wood, alice.balance.gold)

    _accept(state, Deploy(UnitType.ARCHER, 10))
    assert (alice.balance.wood, alice.balance.gold) == before


def test_stronger_battlefield_force_wins():
    state = _armies_game(rounds=5)
    _accept(state, Deploy(UnitType.ARCHER, 10), Deploy(UnitType.WARRIOR, 16))

    assert state.phase is GamePhase.ENDED
    assert state.current_round == 5
    assert state.result.winner == BOB
    assert state.result.strengths[ALICE] == pytest.approx(19.0)
    assert state.result.strengths[BOB] == pytest.approx(19.2)


def test_equal_battlefield_forces_draw():
    state = _game(rounds=5)
    _accept(state, Harvest(), Harvest())
    _accept(state, Harvest(), Harvest())
    _accept(state, BuildBase(), BuildBase())
    _accept(state, Train(UnitType.ARCHER, 10), Train(UnitType.ARCHER, 10))
    _accept(state, Deploy(UnitType.ARCHER, 10), Deploy(UnitType.ARCHER, 10))

    assert state.result.is_draw


def test_undeployed_units_do_not_score():
    state = _armies_game(rounds=5)
    _accept(state, Deploy(UnitType.ARCHER, 1), Harvest())
    assert state.result.winner == ALICE


def test_quit_player_is_skipped_but_still_scored():
    state = _armies_game(rounds=8)
    _accept(state, Deploy(UnitType.ARCHER, 10), Deploy(UnitType.WARRIOR, 5))

    _accept(state, Quit())
    alice = state.player(ALICE)
    frozen = (alice.balance.wood, alice.balance.gold, dict(alice.roster))
    assert not alice.active

    # Bob finishes round six and plays rounds seven and eight alone.
    _accept(state, Harvest())
    assert state.current_round == 7
    assert turns.current_player(state).id == BOB
    _accept(state, Train(UnitType.WARRIOR, 16))
    assert turns.current_player(state).id == BOB
    _accept(state, Deploy(UnitType.WARRIOR, 16))

    assert state.phase is GamePhase.ENDED
    assert (alice.balance.wood, alice.balance.gold, dict(alice.roster)) == frozen
    assert state.result.strengths[ALICE] == pytest.approx(19.0)
    assert state.result.strengths[BOB] == pytest.approx(25.2)
    assert state.result.winner == BOB


def test_quitter_keeps_winning_force():
    state = _armies_game(rounds=10)
    _accept(state, Deploy(UnitType.ARCHER, 10), Quit())
    assert turns.current_player(state).id == ALICE

    for _ in range(5):
        _accept(state, Harvest())
    assert state.phase is GamePhase.ENDED
    assert state.result.winner == ALICE


def test_everyone_quitting_ends_the_game():
    state = _game()
    _accept(state, Quit(), Quit())
    assert state.phase is GamePhase.ENDED
    assert state.current_round == 1
    assert state.result.is_draw


def test_quit_can_end_game_after_the_round():
    rules = RulesConfig(game=GameRules(quit_ends_game_after_round=True))
    state = _game()
    _accept(state, Quit(), rules=rules)
    assert state.phase is GamePhase.AWAITING_ACTION
    _accept(state, Harvest(), rules=rules)

    assert state.phase is GamePhase.ENDED
    assert state.current_round == 1


def test_game_ends_after_last_round():
    state = _game(rounds=1)
    _accept(state, Harvest())
    assert state.phase is GamePhase.AWAITING_ACTION
    _accept(state, Harvest())
    assert state.phase is GamePhase.ENDED
    assert state.result.is_draw


def test_actions_after_game_end_are_refused():
    state = _game(rounds=1)
    _accept(state, Harvest(), Harvest())
    with pytest.raises(GameOverError):
        turns.apply_action(state, Harvest())


def test_action_for_player_out_of_turn_is_rejected():
    state = _game()
    outcome = turns.apply_action(state, Harvest(), player_id=BOB)
    assert isinstance(outcome.error, NotPlayersTurn)
    assert state.player(BOB).balance.wood == 0
    assert turns.current_player(state).id == ALICE


def test_action_for_player_who_quit_is_rejected():
    state = _game()
    _accept(state, Quit())
    outcome = turns.apply_action(state, Harvest(), player_id=ALICE)
    assert isinstance(outcome.error, PlayerInactive)

    outcome = turns.apply_action(state, Harvest(), player_id=BOB)
    assert outcome.accepted


def test_end_game_resolves_once():
    state = _armies_game(rounds=10)
    _accept(state, Deploy(UnitType.ARCHER, 2))
    result = turns.end_game(state)

    assert state.phase is GamePhase.ENDED
    assert result.winner == ALICE
    assert turns.end_game(state) is result


def test_snapshot_reports_player_view():
    state = _armies_game(rounds=10)
    _accept(state, Deploy(UnitType.ARCHER, 4))
    snap = turns.snapshot(state, ALICE)

    assert snap.nick == "Alice"
    assert snap.bases == 1
    assert snap.capacity == 200
    assert snap.roster == {UnitType.ARCHER: 6, UnitType.WARRIOR: 0}
    assert snap.committed == {UnitType.ARCHER: 4, UnitType.WARRIOR: 0}
    assert snap.units_in_use == 10
    assert snap.strength == pytest.approx(7.6)
    assert snap.active


def test_reading_a_player_view_does_not_touch_the_battlefield():
    state = _game()
    _accept(state, Harvest())

    turns.snapshot(state, ALICE)
    turns.snapshot(state, BOB)

    assert state.battlefield.commitments == {}
