# -*- coding: UTF-8 -*-

NAME = "Pawns-Only Chess"

# Player colors
WHITE, BLACK = range(2)

# Game states
RUNNING, DRAW, WHITEWON, BLACKWON, ABORTED = range(5)

UNFINISHED_STATES = (RUNNING, )

# Game state reasons
WON_LASTRANK, WON_NOMATERIAL, DRAW_STALEMATE, ABORTED_EXIT, \
    UNKNOWN_REASON = range(5)

# Board geometry
FILES = 8
RANKS = 8

# Cell contents. A pawn is stored as the color owning it
EMPTY = None

# Rank each color's pawns start on
START_RANK = (1, 6)

# Rank a pawn has to reach to win
LAST_RANK = (7, 0)

# Rank direction a pawn moves in
FORWARD = (1, -1)

# Number of pawns each side starts with
PAWN_COUNT = FILES

cordRepr = "abcdefgh"

EXIT_COMMAND = "exit"
