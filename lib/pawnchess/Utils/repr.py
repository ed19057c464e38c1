from .const import WHITE, BLACK, WHITEWON, BLACKWON, DRAW, ABORTED, \
    WON_LASTRANK, WON_NOMATERIAL, DRAW_STALEMATE, ABORTED_EXIT

reprColor = ["White", "Black"]

# Used in "No white pawn at e2"
reprColorLower = ["white", "black"]

# One letter per pawn on the text board
reprPawn = ["W", "B"]

reprResult = {
    WHITEWON: "%s Wins!" % reprColor[WHITE],
    BLACKWON: "%s Wins!" % reprColor[BLACK],
    DRAW: "Stalemate!",
    ABORTED: "Bye!",
}

reprReason_long = {
    WON_LASTRANK: "Because %(winner)s reached the last rank",
    WON_NOMATERIAL: "Because %(loser)s has no pawns left",
    DRAW_STALEMATE: "Because %(mover)s has no legal move",
    ABORTED_EXIT: "Because %(mover)s left the game",
}

BYE = "Bye!"
INVALID_INPUT = "Invalid Input"
