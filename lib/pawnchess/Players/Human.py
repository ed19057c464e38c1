from pawnchess.Players.Player import Player
from pawnchess.System.Log import log
from pawnchess.Utils.const import EXIT_COMMAND


def get_input():
    return input()


def say(text):
    print(text, flush=True)
    log.debug(text, extra={"task": "stdout"})


def ask(prompt):
    """ Prints prompt and reads one line. Returns None at end of input """
    say(prompt)
    try:
        line = get_input()
    except EOFError:
        log.debug("EOF", extra={"task": "stdin"})
        return None
    log.debug(line, extra={"task": "stdin"})
    return line


class Human(Player):
    """ A player sitting at the console """

    def makeMove(self):
        line = ask("%s's turn:" % self.name)
        if line is None:
            return EXIT_COMMAND
        return line
