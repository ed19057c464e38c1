from pawnchess.Players.Player import InvalidMove, GameEnded
from pawnchess.System.Log import log

from .Board import Board
from .Move import parseAN
from .logic import getStatus
from .validator import NO_ENPASSANT, validate, isEnPassant, enPassantAfter
from .const import WHITE, BLACK, EMPTY, RUNNING, UNFINISHED_STATES, ABORTED, \
    ABORTED_EXIT, UNKNOWN_REASON, FORWARD, EXIT_COMMAND
from .repr import reprColor, reprColorLower, reprResult, reprReason_long, INVALID_INPUT


class GameModel:
    """ GameModel contains all available data on a pawns-only game.
        It also has the task of controlling the players moves.

        A turn is a single call to turn() with a line of player input. Input
        which can't be played raises ParsingError or InvalidMove and leaves
        the game untouched, so the same player is simply asked again. """

    def __init__(self, players, board=None):
        """ players is a (white, black) pair. If a prepared board is given the
            players pawn counts are taken from it """

        self.players = list(players)
        if len(self.players) != 2:
            raise ValueError("a game needs exactly two players")
        if self.players[WHITE].color != WHITE or self.players[BLACK].color != BLACK:
            raise ValueError("players must be (white, black)")

        if board is None:
            self.board = Board(setup=True)
        else:
            self.board = board
            for player in self.players:
                player.pawns = board.pawnCount(player.color)

        self.moves = []
        self.curColor = WHITE
        self.enpassant = NO_ENPASSANT

        self.status = RUNNING
        self.reason = UNKNOWN_REASON

    @property
    def curPlayer(self):
        return self.players[self.curColor]

    @property
    def opponent(self):
        return self.players[1 - self.curColor]

    @property
    def ply(self):
        return len(self.moves)

    def isEnded(self):
        return self.status not in UNFINISHED_STATES

    def turn(self, text):
        """ Plays one line of input from the player to move and returns the
            game status afterwards """

        if self.isEnded():
            raise GameEnded(reprResult[self.status])

        if text == EXIT_COMMAND:
            self.end(ABORTED, ABORTED_EXIT)
            return self.status

        return self.applyMove(parseAN(text))

    def applyMove(self, move):
        color = self.curColor
        board = self.board
        x0, y0 = move.cord0.cords
        x1, y1 = move.cord1.cords

        if board.get(x0, y0) != color:
            raise InvalidMove("No %s pawn at %s" % (reprColorLower[color], move.cord0))

        if not validate(board, move, color, self.enpassant):
            log.debug("%s rejected for %s" % (move, reprColor[color]),
                      extra={"task": "game"})
            raise InvalidMove(INVALID_INPUT)

        dest = board.get(x1, y1)
        enpassant = isEnPassant(move, dest, self.enpassant)
        if dest != EMPTY or enpassant:
            self.opponent.pawns -= 1

        board.move(x0, y0, x1, y1, color)
        if enpassant:
            # The captured pawn stands right behind the destination square
            board.clear(x1, y1 - FORWARD[color])

        self.enpassant = enPassantAfter(x0, y0, y1, color)
        self.moves.append(move)
        log.debug("ply %d: %s %s" % (self.ply, reprColor[color], move),
                  extra={"task": "game"})

        status, reason = getStatus(board, color, move.cord1, self.opponent.pawns)
        if status != RUNNING:
            self.end(status, reason)
        else:
            self.curColor = 1 - color

        return self.status

    def end(self, status, reason):
        self.status = status
        self.reason = reason
        names = {
            "winner": self.curPlayer.name,
            "loser": self.opponent.name,
            "mover": self.curPlayer.name if status == ABORTED else self.opponent.name,
        }
        log.info("%s %s" % (reprResult[status], reprReason_long[reason] % names),
                 extra={"task": "game"})
