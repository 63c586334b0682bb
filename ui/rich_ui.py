# -*- coding: utf-8 -*-
"""
Rich TUI Module
Renders a Gwynt match with the 'rich' library and prompts for the next
action. Presentation only: nothing here mutates the match.
"""

from typing import TYPE_CHECKING, Callable, List, Optional

from rich.box import DOUBLE, ROUNDED
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from gwynt.actions import Action, Pass, PlayCard
from gwynt.card import CardKind, Row
from gwynt.enums import MatchResult, PlayerId
from gwynt.events import EventType
from i18n import kind_name, row_name, t
from ui.input_safety import safe_input

if TYPE_CHECKING:
    from gwynt.card import Card
    from gwynt.engine import GameState
    from gwynt.events import EventBus, GameEvent
    from gwynt.player import Board, PlayerState
    from gwynt.win_checker import MatchOutcome


ROW_COLORS = {
    Row.MELEE: "red",
    Row.RANGED: "green",
    Row.SIEGE: "blue",
}

PLAYER_COLORS = {
    PlayerId.ONE: "cyan",
    PlayerId.TWO: "magenta",
}


class RichTerminalUI:
    """
    Rich TUI Class
    Draws boards, hand and action menu; collects the player's choice.
    """

    def __init__(
        self,
        use_color: bool = True,
        console: Optional[Console] = None,
        input_func: Callable[..., Optional[str]] = safe_input,
    ):
        self.console = console or Console(highlight=False, no_color=not use_color)
        self.input_func = input_func
        self.log_messages: List[str] = []
        self.max_log_lines = 8

    # --- Event log ---

    def attach(self, event_bus: 'EventBus') -> None:
        """Feed the log panel from the match's event bus"""
        event_bus.subscribe_all(self.on_event)

    def on_event(self, event: 'GameEvent') -> None:
        message = self._describe_event(event)
        if message:
            self.show_log(message)

    def _describe_event(self, event: 'GameEvent') -> Optional[str]:
        player = event.player.value if event.player else None
        if event.event_type == EventType.GAME_START:
            return t("log.game_start")
        if event.event_type == EventType.CARD_PLAYED:
            key = "log.spy_played" if event.card.kind is CardKind.SPY else "log.card_played"
            return t(key, player=player, card=self.format_card(event.card))
        if event.event_type == EventType.CARD_DRAWN:
            return t("log.drew", player=player, count=len(event.cards))
        if event.event_type == EventType.PLAYER_PASSED:
            return t("log.passed", player=player)
        if event.event_type == EventType.ACTION_IGNORED:
            return t("log.ignored", player=player, card_id=event.data.get("card_id"))
        if event.event_type == EventType.ROUND_END:
            one, two = event.data.get("scores", (0, 0))
            winner = event.data.get("winner")
            if winner is None:
                return t("log.round_tie", round=event.round, one=one, two=two)
            return t("log.round_won", round=event.round, one=one, two=two, player=winner.value)
        return None

    def show_log(self, message: str) -> None:
        self.log_messages.append(message)

    # --- Formatting ---

    def format_card(self, card: 'Card') -> str:
        """Plain-text card label, e.g. ``Ves (5 ⚔) #6``"""
        label = f"{card.display_name} #{card.id}"
        if card.kind is CardKind.SPY:
            label += f" [{kind_name(card.kind.value)}]"
        return label

    def _card_text(self, card: 'Card') -> Text:
        style = ROW_COLORS.get(card.row, "white")
        if card.kind is CardKind.SPY:
            style = f"bold {style}"
        return Text(self.format_card(card), style=style)

    def format_action(self, game: 'GameState', action: Action) -> str:
        if isinstance(action, Pass):
            return t("ui.action_pass")
        card = game.current.find_in_hand(action.card_id)
        if card is None:
            return t("ui.action_play_unknown", card_id=action.card_id)
        return t("ui.action_play", card=self.format_card(card))

    # --- Game State Rendering ---

    def show_title(self) -> None:
        self.console.print(Panel(Text(t("main.banner"), style="bold yellow"), box=DOUBLE))

    def _render_header(self, game: 'GameState') -> Panel:
        grid = Table.grid(expand=True)
        grid.add_column(justify="left", ratio=1)
        grid.add_column(justify="center", ratio=1)
        grid.add_column(justify="right", ratio=1)

        current = game.current_player
        grid.add_row(
            t("ui.round_header", round=game.round),
            Text(t("ui.turn_of", player=current.value), style=f"bold {PLAYER_COLORS[current]}"),
            t(
                "ui.rounds_won",
                one=game.rounds_won(PlayerId.ONE),
                two=game.rounds_won(PlayerId.TWO),
            ),
        )
        return Panel(grid, style="white on blue")

    def _render_board(self, board: 'Board', title: str, owner: 'PlayerState', color: str) -> Panel:
        grid = Table.grid(padding=(0, 1))
        grid.add_column(justify="right", style="bold")
        grid.add_column()
        for row in Row:
            cards = board.row(row)
            line = Text()
            if not cards:
                line.append(t("ui.empty"), style="dim")
            for i, card in enumerate(cards):
                if i:
                    line.append("  ")
                line.append_text(self._card_text(card))
            grid.add_row(Text(row_name(row.value), style=ROW_COLORS[row]), line)

        subtitle = t("ui.passed") if owner.passed else None
        return Panel(grid, title=title, subtitle=subtitle, border_style=color, box=ROUNDED)

    def _render_hand(self, player: 'PlayerState') -> Panel:
        table = Table(box=ROUNDED, show_edge=False, expand=True)
        table.add_column(t("ui.col_id"), justify="right")
        table.add_column(t("ui.col_name"))
        table.add_column(t("ui.col_power"), justify="right")
        table.add_column(t("ui.col_row"))
        table.add_column(t("ui.col_kind"))

        for card in player.hand:
            style = ROW_COLORS.get(card.row, "white")
            table.add_row(
                str(card.id),
                Text(card.name, style=f"bold {style}" if card.is_spy else style),
                str(card.power),
                row_name(card.row.value),
                kind_name(card.kind.value),
            )

        title = t("ui.your_hand", count=player.hand_count, deck=player.deck_count)
        return Panel(table, title=title, border_style="green")

    def _render_logs(self) -> Panel:
        log_text = Text()
        for msg in self.log_messages[-self.max_log_lines:]:
            log_text.append(msg + "\n")
        return Panel(log_text, title=t("ui.log_title"), border_style="cyan")

    def show_game_state(self, game: 'GameState', viewer: Optional[PlayerId] = None) -> None:
        """Render the match from ``viewer``'s seat (the current player by default)"""
        viewer = viewer or game.current_player
        me = game.player(viewer)
        other = game.opponent_of(viewer)

        self.console.print(
            Group(
                self._render_header(game),
                self._render_board(
                    other.board,
                    t("ui.opponent_board", power=game.total_power(viewer.other)),
                    other,
                    PLAYER_COLORS[viewer.other],
                ),
                self._render_board(
                    me.board,
                    t("ui.your_board", power=game.total_power(viewer)),
                    me,
                    PLAYER_COLORS[viewer],
                ),
                self._render_hand(me),
                self._render_logs(),
            )
        )

    def show_actions(self, game: 'GameState', actions: List[Action]) -> None:
        self.console.print(f"\n[bold cyan]{t('ui.actions')}[/bold cyan]")
        for i, action in enumerate(actions):
            self.console.print(f"  [{i}] {self.format_action(game, action)}", markup=False)

    # --- Interaction ---

    def choose_action(self, actions: List[Action]) -> Optional[Action]:
        """
        Prompt until a valid index into ``actions`` is entered.

        Returns:
            the chosen action, or None when input is closed
        """
        while True:
            raw = self.input_func(t("ui.choose"), None)
            if raw is None:
                return None
            try:
                idx = int(raw.strip())
            except ValueError:
                self.show_error(t("ui.enter_number"))
                continue
            if 0 <= idx < len(actions):
                return actions[idx]
            self.show_error(t("ui.invalid_choice"))

    def show_message(self, message: str) -> None:
        self.console.print(message, markup=False)

    def show_error(self, message: str) -> None:
        self.console.print(Text(message, style="red"))

    def show_game_over(self, outcome: 'MatchOutcome') -> None:
        one, two = outcome.rounds_won
        body = Text()
        body.append(t("ui.rounds_won", one=one, two=two) + "\n")
        if outcome.result == MatchResult.DECIDED:
            body.append(outcome.message, style=f"bold {PLAYER_COLORS[outcome.winner]}")
        else:
            body.append(outcome.message, style="bold yellow")
        self.console.print(Panel(body, title=t("ui.game_over_title"), box=DOUBLE))
