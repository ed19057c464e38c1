import re

from .Cord import Cord

MOVE_REGEX = re.compile(r"([a-h][1-8]){2}")


class ParsingError(Exception):
    """ Raised when a line is not a move in the form e2e4 """
    pass


class Move:

    def __init__(self, cord0, cord1):
        """ Inits a new Move object.
            The object can be initialized in the follow ways:
                Move(Cord("e2"), Cord("e4"))
                Move("e2", "e4") """

        if isinstance(cord0, str):
            cord0 = Cord(cord0)
        if isinstance(cord1, str):
            cord1 = Cord(cord1)
        self.cord0 = cord0
        self.cord1 = cord1

    def _get_cords(self):
        return (self.cord0, self.cord1)

    cords = property(_get_cords)

    def isDiagonal(self):
        return self.cord0.x != self.cord1.x

    def __eq__(self, other):
        return isinstance(other, Move) and self.cords == other.cords

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        return hash(self.cords)

    def __repr__(self):
        return "%s%s" % (self.cord0, self.cord1)


def parseAN(text):
    """ Parse coordinate notation like e2e4 into a Move """

    if not MOVE_REGEX.fullmatch(text):
        raise ParsingError(text, "it is not two board squares", None)
    return Move(Cord(text[0:2]), Cord(text[2:4]))
