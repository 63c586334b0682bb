"""English translation table (default and fallback)."""

STRINGS: dict[str, str] = {
    # ── rows / kinds ──
    "row.melee": "Melee",
    "row.ranged": "Ranged",
    "row.siege": "Siege",
    "kind.unit": "Unit",
    "kind.spy": "Spy",

    # ── RichTerminalUI ──
    "ui.round_header": "Round {round}",
    "ui.rounds_won": "Rounds won: P1={one} | P2={two}",
    "ui.turn_of": "Turn of player {player}",
    "ui.your_board": "Your board (total power = {power})",
    "ui.opponent_board": "Opponent board (total power = {power})",
    "ui.your_hand": "Your hand ({count} cards, {deck} left in deck)",
    "ui.empty": "(empty)",
    "ui.passed": "passed",
    "ui.actions": "Possible actions",
    "ui.action_play": "Play {card}",
    "ui.action_play_unknown": "Play card id {card_id}",
    "ui.action_pass": "Pass",
    "ui.choose": "Choice: ",
    "ui.invalid_choice": "Invalid choice, try again.",
    "ui.enter_number": "Please enter a number.",
    "ui.no_actions": "No action available.",
    "ui.log_title": "Log",
    "ui.game_over_title": "End of the match",
    "ui.col_id": "Id",
    "ui.col_name": "Name",
    "ui.col_power": "Power",
    "ui.col_row": "Row",
    "ui.col_kind": "Kind",

    # ── event log ──
    "log.game_start": "The match begins.",
    "log.card_played": "Player {player} plays {card}.",
    "log.spy_played": "Player {player} sends spy {card} to the opponent's board.",
    "log.drew": "Player {player} draws {count} card(s).",
    "log.passed": "Player {player} passes.",
    "log.ignored": "Card id {card_id} is not in player {player}'s hand, ignored.",
    "log.round_won": "Round {round}: {one} vs {two}, player {player} wins the round.",
    "log.round_tie": "Round {round}: {one} vs {two}, tie.",

    # ── outcome ──
    "game.in_progress": "The match is still in progress.",
    "game.over_tie": "Draw.",
    "game.over_winner": "Player {player} wins!",

    # ── exceptions ──
    "exc.invalid_action": "Invalid action",
    "exc.game_state": "Operation not allowed in the current match state",
    "exc.game_finished": "The match is already finished",
    "exc.config_error": "Invalid configuration",
    "exc.data_load_error": "Could not load card data",

    # ── main.py ──
    "main.banner": "=== Gwynt ===",
    "main.interrupted": "\n\nMatch interrupted. Goodbye!",
    "main.error": "\nError: {error}",
    "main.config_invalid": "Invalid configuration: {errors}",
    "main.unfinished": "Match left unfinished in round {round}.",
}
