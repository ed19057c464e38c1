from collections import namedtuple

from .const import EMPTY, START_RANK, FORWARD

################################################################################
#   En passant context                                                         #
################################################################################

# Set after a two rank pawn advance, and only for the one turn following it.
# file and rank point at the square the pawn passed over.
EnPassant = namedtuple("EnPassant", "active file rank")

NO_ENPASSANT = EnPassant(False, None, None)


def isDoubleStep(y0, y1, color):
    return y0 == START_RANK[color] and y1 - y0 == 2 * FORWARD[color]


def enPassantAfter(x0, y0, y1, color):
    """ Returns the en passant context the opponent gets after a pawn of color
        moved from (x0, y0) to rank y1 """
    if isDoubleStep(y0, y1, color):
        return EnPassant(True, x0, y0 + FORWARD[color])
    return NO_ENPASSANT


def isEnPassantTarget(x, y, enpassant):
    return enpassant.active and enpassant.file == x and enpassant.rank == y


def isEnPassant(move, dest, enpassant):
    x1, y1 = move.cord1.cords
    return move.isDiagonal() and dest == EMPTY and \
        isEnPassantTarget(x1, y1, enpassant)

################################################################################
#   Validate move                                                              #
################################################################################


def isLegal(x0, y0, x1, y1, color, dest, enpassant=NO_ENPASSANT):
    """ Decides if a pawn of color may move from (x0, y0) to (x1, y1), dest
        being what currently stands on (x1, y1).
        The checks depend on their order, e.g. the file distance is only
        looked at once straight moves have been dealt with. """

    diagonal = x1 != x0

    # Pawns never capture straight ahead
    if not diagonal and dest != EMPTY:
        return False

    # A diagonal move onto an empty square has to be an en passant capture
    if diagonal and dest == EMPTY and \
            not isEnPassantTarget(x1, y1, enpassant):
        return False

    if diagonal and dest == color:
        return False

    if diagonal and abs(x1 - x0) != 1:
        return False

    forward = FORWARD[color]
    if y0 == START_RANK[color] and not diagonal:
        return y1 - y0 in (forward, 2 * forward)
    return y1 - y0 == forward


def validate(board, move, color, enpassant=NO_ENPASSANT):
    """ Like isLegal, but for a Move on a Board. Also makes sure the move
        starts on a pawn of color """

    if board[move.cord0] != color:
        return False
    x0, y0 = move.cord0.cords
    x1, y1 = move.cord1.cords
    return isLegal(x0, y0, x1, y1, color, board[move.cord1], enpassant)
