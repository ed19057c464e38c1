from pawnchess.Players.Human import Human, ask, say
from pawnchess.Players.Player import InvalidMove
from pawnchess.System import conf
from pawnchess.System.Log import log
from pawnchess.Utils.GameModel import GameModel
from pawnchess.Utils.Move import ParsingError
from pawnchess.Utils.const import NAME, WHITE, BLACK, RUNNING, ABORTED
from pawnchess.Utils.repr import reprResult, BYE, INVALID_INPUT


def run():
    """ Plays one game on the console """

    if conf.get("showBanner"):
        say(NAME)

    names = []
    for prompt in ("First player's name:", "Second player's name:"):
        name = ask(prompt)
        if name is None:
            say(BYE)
            return
        names.append(name)

    game = GameModel((Human(names[0], WHITE), Human(names[1], BLACK)))
    log.info("New game: %s vs %s" % tuple(names), extra={"task": "game"})
    say(game.board.render())

    while True:
        line = game.curPlayer.makeMove()
        try:
            status = game.turn(line)
        except ParsingError:
            say(INVALID_INPUT)
            continue
        except InvalidMove as err:
            say(str(err))
            continue

        if status == ABORTED:
            say(BYE)
            return

        say(game.board.render())
        if status != RUNNING:
            say(reprResult[status])
            say(BYE)
            return
