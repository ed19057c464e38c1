from .Cord import Cord
from .const import WHITE, BLACK, EMPTY, FILES, RANKS, START_RANK, FORWARD, cordRepr
from .repr import reprPawn


class OutOfRange(Exception):
    """ Raised when a square outside the 8x8 grid is addressed. Move input is
        checked before it reaches the board, so this always means a bug """
    pass


class Board:
    """ Board holds the pawns of both colors on an 8x8 grid.
        self.data is indexed data[rank][file]. A cell is either EMPTY or the
        color of the pawn standing on it.
        The board knows nothing about turns or en passant, the GameModel only
        changes it through validated moves. """

    FILES = FILES
    RANKS = RANKS

    def __init__(self, setup=False, pawns=None):
        """ Board() and Board(setup=False) give an empty board,
            Board(setup=True) the start position.
            pawns is an optional mapping of squares to colors which is placed
            on top of that, e.g. Board(pawns={"e4": WHITE, "d5": BLACK}) """

        self.data = [[EMPTY] * self.FILES for i in range(self.RANKS)]

        if setup:
            for color in (WHITE, BLACK):
                for x_loc in range(self.FILES):
                    self.data[START_RANK[color]][x_loc] = color

        if pawns:
            for cord, color in pawns.items():
                if not isinstance(cord, Cord):
                    cord = Cord(cord)
                self[cord] = color

    def _checkRange(self, x, y):
        if not (0 <= x < self.FILES and 0 <= y < self.RANKS):
            raise OutOfRange("Illegal Arguments! %s %s" % (x, y))

    def get(self, x, y):
        self._checkRange(x, y)
        return self.data[y][x]

    def set(self, x, y, value):
        self._checkRange(x, y)
        self.data[y][x] = value

    def clear(self, x, y):
        self.set(x, y, EMPTY)

    def move(self, x0, y0, x1, y1, color):
        """ Moves a pawn of color from (x0, y0) to (x1, y1).
            Whatever stood on the destination is overwritten, so captures have
            to be accounted for by the caller """
        self._checkRange(x0, y0)
        self._checkRange(x1, y1)
        self.clear(x0, y0)
        self.set(x1, y1, color)

    def pawnCount(self, color):
        return sum(row.count(color) for row in self.data)

    def hasAnyLegalMove(self, color):
        """ True if some pawn of color can step forward onto an empty square or
            capture diagonally. En passant captures are not taken into account.
            The back ranks are skipped, a pawn standing on the last rank has
            already won the game """

        forward = FORWARD[color]
        enemy = BLACK if color == WHITE else WHITE
        for y in range(1, self.RANKS - 1):
            for x in range(self.FILES):
                if self.get(x, y) != color:
                    continue
                if self.get(x, y + forward) == EMPTY:
                    return True
                if x > 0 and self.get(x - 1, y + forward) == enemy:
                    return True
                if x < self.FILES - 1 and self.get(x + 1, y + forward) == enemy:
                    return True
        return False

    def render(self):
        separator = "  " + "+---" * self.FILES + "+"
        lines = []
        for y in reversed(range(self.RANKS)):
            lines.append(separator)
            cells = [" " if cell == EMPTY else reprPawn[cell] for cell in self.data[y]]
            lines.append("%d | %s |" % (y + 1, " | ".join(cells)))
        lines.append(separator)
        lines.append("    " + "   ".join(cordRepr[:self.FILES]))
        return "\n".join(lines)

    def clone(self):
        newBoard = Board()
        newBoard.data = [row[:] for row in self.data]
        return newBoard

    def __getitem__(self, cord):
        return self.get(cord.x, cord.y)

    def __setitem__(self, cord, value):
        self.set(cord.x, cord.y, value)

    def __eq__(self, other):
        return isinstance(other, Board) and self.data == other.data

    def __repr__(self):
        return self.render()
