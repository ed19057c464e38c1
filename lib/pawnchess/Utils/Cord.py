from .const import RANKS, cordRepr


class CordFormatException(Exception):
    pass


class Cord:
    def __init__(self, var1, var2=None):
        """ Inits a new cord object.
            The cord b3 can be inited in the folowing ways:
            Cord("b3"), Cord(1, 2), Cord("b", 3)
        """

        if var2 is None:
            # We assume the format Cord("b3")
            if not isinstance(var1, str) or len(var1) != 2:
                raise CordFormatException("Not a board square: %r" % (var1, ))
            self.x = self.charToInt(var1[0])
            self.y = self.digitToInt(var1[1])
        else:
            if isinstance(var1, str):
                # We assume the format Cord("b", 3)
                self.x = self.charToInt(var1)
                self.y = var2 - 1
            else:
                # We assume the format Cord(1, 2)
                self.x = var1
                self.y = var2

    def _get_cx(self):
        return self.intToChar(self.x)

    cx = property(_get_cx)

    def _get_cy(self):
        return str(self.y + 1)

    cy = property(_get_cy)

    def intToChar(self, x):
        return cordRepr[x]

    def charToInt(self, char):
        ord_char = ord(char)
        if ord('a') <= ord_char <= ord('h'):
            return ord_char - ord('a')
        raise CordFormatException("x < 0 || x > 7 (%s, %d)" % (char, ord_char))

    def digitToInt(self, char):
        if char.isdigit() and 1 <= int(char) <= RANKS:
            return int(char) - 1
        raise CordFormatException("y < 0 || y > 7 (%s)" % char)

    def _set_cords(self, x_y):
        self.x, self.y = x_y

    def _get_cords(self):
        return (self.x, self.y)

    cords = property(_get_cords, _set_cords)

    def __eq__(self, other):
        return isinstance(other, Cord) and other.x == self.x and other.y == self.y

    def __ne__(self, other):
        return not self.__eq__(other)

    def __repr__(self):
        return self.cx + self.cy

    def __hash__(self):
        return self.x * 8 + self.y
