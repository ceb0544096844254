"""Terminal shell: reads commands, drives the turn engine, prints results."""

from __future__ import annotations

import argparse
import logging
import time
from collections.abc import Callable, Sequence

from pydantic import ValidationError

from wartycoon.config import Settings, get_settings
from wartycoon.domain import battlefield, roster, turns
from wartycoon.domain.actions import Action
from wartycoon.domain.enums import ActionKind, GamePhase, UnitType
from wartycoon.domain.models import GameResult, GameState, PlayerSnapshot
from wartycoon.domain.rules_config import DEFAULT_RULES, RulesConfig
from wartycoon.schemas import ActionRequest, GameSetup, normalize_action_kind

logger = logging.getLogger(__name__)

HELP_COMMANDS = {"6", "h", "help"}
STATS_COMMANDS = {"7", "stats", "statistics"}
RULES_COMMANDS = {"8", "rules"}
CONFIRM_ANSWERS = {"", "y", "yes"}
DECLINE_ANSWERS = {"n", "no"}

HELP_TEXT = """\
ROUND CONTROLS:
 '1' or 'build'            build a base
 '2' or 'harvest'          harvest resources
 '3' or 'train'            train units (then type the unit type and count)
 '4' or 'deploy'/'conquer' send trained units to the battlefield
 '5' or 'q'/'quit'         quit the game (the round continues for others)
 '6' or 'h'/'help'         show this help
 '7' or 'stats'            show your current statistics
 '8' or 'rules'            show the game rules"""


def rules_text(rules: RulesConfig = DEFAULT_RULES) -> str:
    """Describe the rule set in plain words."""

    archer = rules.units.for_type(UnitType.ARCHER)
    warrior = rules.units.for_type(UnitType.WARRIOR)
    return "\n".join(
        [
            f"- Harvesting gives {rules.economy.harvest_wood} wood and "
            f"{rules.economy.harvest_gold} gold.",
            "- A base is required in order to train units.",
            f"- A base costs {rules.bases.wood_cost} wood and {rules.bases.gold_cost} gold.",
            f"- Each base holds {rules.bases.capacity} units; build more bases for more units.",
            f"- An Archer costs {archer.wood_cost} wood and {archer.gold_cost} gold "
            f"and has strength {archer.strength}.",
            f"- A Warrior costs {warrior.wood_cost} wood and {warrior.gold_cost} gold "
            f"and has strength {warrior.strength}.",
            "- Deployed troops stay on the battlefield for the rest of the game.",
            "- The strongest force on the battlefield at the end of the game wins.",
            "- Equal forces on the battlefield mean a draw.",
            "- You may quit in any round; the round continues for the other player.",
        ]
    )


def render_snapshot(snap: PlayerSnapshot, round_number: int, moment: str = "in") -> str:
    lines = [
        f"{snap.nick}'s statistics {moment} round {round_number}",
        f"  bases:       {snap.bases} (using {snap.units_in_use} / {snap.capacity} capacity)",
        f"  resources:   {snap.wood} wood, {snap.gold} gold",
        "  available:   "
        + ", ".join(f"{snap.roster[unit]} {unit}" for unit in UnitType),
        "  battlefield: "
        + ", ".join(f"{snap.committed[unit]} {unit}" for unit in UnitType)
        + f" (strength {snap.strength:.1f})",
    ]
    return "\n".join(lines)


def render_result(state: GameState, result: GameResult) -> str:
    lines = ["", "GAME OVER"]
    for player in state.players:
        lines.append(f"  {player.nick}: strength {result.strengths[player.id]:.1f}")
    if result.is_draw:
        lines.append("Draw! No player holds the strongest force on the battlefield.")
    else:
        winner = state.player(result.winner)
        lines.append(f"Winner of the game is {winner.nick}!")
    return "\n".join(lines)


class TerminalShell:
    """Interactive turn loop over any line reader and writer."""

    def __init__(
        self,
        *,
        read: Callable[[str], str] | None = None,
        write: Callable[[str], None] | None = None,
        sleep: Callable[[float], None] | None = None,
        pause_seconds: float = 0.0,
        rules: RulesConfig = DEFAULT_RULES,
    ) -> None:
        self._read = read or input
        self._write = write or print
        self._sleep = sleep or time.sleep
        self.pause_seconds = pause_seconds
        self.rules = rules

    def play(self, state: GameState) -> GameResult:
        """Run the game to completion and return its result."""

        while state.phase is GamePhase.AWAITING_ACTION:
            player = turns.current_player(state)
            self._write(f"\n=== It's {player.nick}'s turn for round {state.current_round}! ===")
            if not self._take_turn(state):
                self._write("Input closed; ending the game.")
                break
            if self.pause_seconds:
                self._sleep(self.pause_seconds)

        result = turns.end_game(state, rules=self.rules)
        self._write(render_result(state, result))
        return result

    def _take_turn(self, state: GameState) -> bool:
        """Prompt until the current player's action is confirmed and accepted.

        Returns ``False`` when the input stream ends.
        """

        player = turns.current_player(state)
        snap = turns.snapshot(state, player.id, rules=self.rules)
        self._write(render_snapshot(snap, state.current_round, "at the start of"))
        while True:
            try:
                command = self._read(f"{player.nick}> ").strip().lower()
            except EOFError:
                return False

            if command in HELP_COMMANDS:
                self._write(HELP_TEXT)
                continue
            if command in STATS_COMMANDS:
                snap = turns.snapshot(state, player.id, rules=self.rules)
                self._write(render_snapshot(snap, state.current_round))
                continue
            if command in RULES_COMMANDS:
                self._write(rules_text(self.rules))
                continue

            kind = normalize_action_kind(command)
            if kind is None:
                self._write(f"Unknown command {command!r}; type 'help' for the controls.")
                continue

            try:
                action = self._build_request(state, kind).to_action()
                confirmed = self._confirm(action)
            except EOFError:
                return False
            except ValidationError as exc:
                problems = "; ".join(error["msg"] for error in exc.errors())
                self._write(f"Incorrect format: {problems}")
                continue
            if not confirmed:
                continue

            round_number = state.current_round
            outcome = turns.apply_action(state, action, rules=self.rules)
            if outcome.accepted:
                self._write(outcome.detail)
                self._write(render_snapshot(outcome.snapshot, round_number))
                return True
            self._write(f"ERROR: {outcome.detail}")

    def _confirm(self, action: Action) -> bool:
        """Ask until the player accepts (enter, y, yes) or declines (n, no)."""

        while True:
            answer = self._read(f"Please confirm this action: {action} [Y/n] ").strip().lower()
            if answer in CONFIRM_ANSWERS:
                return True
            if answer in DECLINE_ANSWERS:
                return False

    def _build_request(self, state: GameState, kind: ActionKind) -> ActionRequest:
        if kind not in (ActionKind.TRAIN, ActionKind.DEPLOY):
            return ActionRequest(kind=kind)

        player = turns.current_player(state)
        unit_raw = self._read("unit type (archer/warrior): ")
        hint = ""
        try:
            unit_type = UnitType(unit_raw.strip().lower().removesuffix("s"))
        except ValueError:
            pass
        else:
            if kind is ActionKind.TRAIN:
                most = roster.train_max_units(
                    player, unit_type, battlefield=state.battlefield, rules=self.rules
                )
            else:
                most = battlefield.send_max_units(player, unit_type)
            hint = f" (at most {most})"
        count_raw = self._read(f"how many{hint}: ")
        return ActionRequest(kind=kind, unit_type=unit_raw, count=count_raw.strip())


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play WarTycoon in the terminal")
    parser.add_argument(
        "--players",
        nargs=2,
        metavar=("FIRST", "SECOND"),
        default=settings.player_names,
        help="Nicknames of the two players",
    )
    parser.add_argument(
        "--rounds", type=int, default=settings.rounds, help="Number of rounds to play"
    )
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level")
    parser.add_argument(
        "--pause",
        type=float,
        default=settings.turn_pause_seconds,
        help="Seconds to pause after each turn",
    )
    return parser


def _print_errors(exc: ValidationError) -> None:
    for error in exc.errors():
        print(f"ERROR: {error['msg']}")


def main(argv: Sequence[str] | None = None) -> int:
    try:
        settings = get_settings()
    except ValidationError as exc:
        _print_errors(exc)
        return 2
    args = build_parser(settings).parse_args(argv)
    logging.basicConfig(level=args.log_level.upper())

    try:
        setup = GameSetup(player_names=args.players, rounds=args.rounds)
    except ValidationError as exc:
        _print_errors(exc)
        return 2

    print("Welcome to WarTycoon! Type 'help' to see the controls.")
    state = turns.new_game(setup.player_names, setup.rounds)
    logger.info("starting %d-round game", setup.rounds)
    TerminalShell(pause_seconds=args.pause).play(state)
    return 0
