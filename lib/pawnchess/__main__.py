import logging
import sys

from pawnchess.System import conf
from pawnchess.System.Log import log, setLevel
from pawnchess.System.prefix import createUserDirs
from pawnchess.Main import run


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]

    if argv == [] or argv == ["debug"]:
        createUserDirs()
        if "debug" in argv:
            log.logger.setLevel(logging.DEBUG)
        else:
            setLevel(conf.get("logLevel"))
    else:
        print("Unknown argument(s):", repr(argv))
        return 0

    run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
