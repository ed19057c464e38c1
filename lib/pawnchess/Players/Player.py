from pawnchess.Utils.const import PAWN_COUNT
from pawnchess.Utils.repr import reprColor


class InvalidMove(Exception):
    """ Used instead of applying a move, when a player enters a move which is
        not allowed. The message is what the player should be told """
    pass


class GameEnded(Exception):
    """ Used when a move is offered to a game which has already ended """
    pass


class Player:
    def __init__(self, name, color, pawns=PAWN_COUNT):
        self.name = name
        self.color = color
        self.pawns = pawns

    def makeMove(self):
        """ Returns the next line of input the player wants to play.
            "exit" ends the game """
        raise NotImplementedError

    def __repr__(self):
        return "<%s %s (%s), %d pawns>" % (
            self.__class__.__name__, self.name, reprColor[self.color], self.pawns)
