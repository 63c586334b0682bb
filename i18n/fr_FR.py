"""Table de traduction française."""

STRINGS: dict[str, str] = {
    # ── rangées / types ──
    "row.melee": "Mêlée",
    "row.ranged": "Distance",
    "row.siege": "Siège",
    "kind.unit": "Unité",
    "kind.spy": "Espion",

    # ── RichTerminalUI ──
    "ui.round_header": "Manche {round}",
    "ui.rounds_won": "Score manches : P1={one} | P2={two}",
    "ui.turn_of": "Tour du joueur {player}",
    "ui.your_board": "Votre board (puissance totale = {power})",
    "ui.opponent_board": "Board adverse (puissance totale = {power})",
    "ui.your_hand": "Votre main ({count} cartes, {deck} dans la pioche)",
    "ui.empty": "(vide)",
    "ui.passed": "a passé",
    "ui.actions": "Actions possibles",
    "ui.action_play": "Jouer {card}",
    "ui.action_play_unknown": "Jouer carte id {card_id}",
    "ui.action_pass": "Passer",
    "ui.choose": "Choix : ",
    "ui.invalid_choice": "Choix invalide, recommence.",
    "ui.enter_number": "Veuillez entrer un nombre.",
    "ui.no_actions": "Aucune action possible.",
    "ui.log_title": "Journal",
    "ui.game_over_title": "Fin de la partie",
    "ui.col_id": "Id",
    "ui.col_name": "Nom",
    "ui.col_power": "Puissance",
    "ui.col_row": "Rangée",
    "ui.col_kind": "Type",

    # ── journal ──
    "log.game_start": "La partie commence.",
    "log.card_played": "Le joueur {player} joue {card}.",
    "log.spy_played": "Le joueur {player} envoie l'espion {card} chez l'adversaire.",
    "log.drew": "Le joueur {player} pioche {count} carte(s).",
    "log.passed": "Le joueur {player} passe.",
    "log.ignored": "La carte id {card_id} n'est pas dans la main du joueur {player}, ignorée.",
    "log.round_won": "Manche {round} : {one} contre {two}, le joueur {player} remporte la manche.",
    "log.round_tie": "Manche {round} : {one} contre {two}, égalité.",

    # ── résultat ──
    "game.in_progress": "La partie est toujours en cours.",
    "game.over_tie": "Égalité.",
    "game.over_winner": "Le joueur {player} gagne !",

    # ── exceptions ──
    "exc.invalid_action": "Action invalide",
    "exc.game_state": "Opération impossible dans l'état actuel de la partie",
    "exc.game_finished": "La partie est déjà terminée",
    "exc.config_error": "Configuration invalide",
    "exc.data_load_error": "Erreur de chargement des cartes",

    # ── main.py ──
    "main.banner": "=== Gwynt minimal ===",
    "main.interrupted": "\n\nPartie interrompue, au revoir !",
    "main.error": "\nErreur : {error}",
    "main.config_invalid": "Configuration invalide : {errors}",
    "main.unfinished": "Partie laissée inachevée à la manche {round}.",
}
