""" This module contains the end of game rules of pawns-only chess """

from .const import WHITE, WHITEWON, BLACKWON, DRAW, RUNNING, LAST_RANK, \
    WON_LASTRANK, WON_NOMATERIAL, DRAW_STALEMATE, UNKNOWN_REASON


def wonStatus(color):
    return WHITEWON if color == WHITE else BLACKWON


def getStatus(board, color, cord1, opponentPawns):
    """ Returns the (status, reason) tuple after a pawn of color landed on
        cord1, leaving the opponent with opponentPawns pawns.
        Both winning conditions are looked at before stalemate. """

    if cord1.y == LAST_RANK[color]:
        return wonStatus(color), WON_LASTRANK

    if opponentPawns == 0:
        return wonStatus(color), WON_NOMATERIAL

    if not board.hasAnyLegalMove(1 - color):
        return DRAW, DRAW_STALEMATE

    return RUNNING, UNKNOWN_REASON
