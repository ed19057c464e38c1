""" The task of this module is to provide easy saving/loading of configurations
    from the user config directory """
import os
import locale
from configparser import RawConfigParser

from pawnchess.System.Log import log
from pawnchess.System.prefix import addUserConfigPrefix

section = "General"
configParser = RawConfigParser(default_section=section)

path = addUserConfigPrefix("config")
encoding = locale.getpreferredencoding()
if os.path.isfile(path):
    configParser.read(path, encoding=encoding)


DEFAULTS = {
    "General": {
        "logLevel": "WARNING",
        "showBanner": True,
    },
}


def get(key, section=section):
    try:
        default = DEFAULTS[section][key]
    except KeyError:
        default = None

    try:
        return configParser.getint(section, key, fallback=default)
    except ValueError:
        pass

    try:
        return configParser.getboolean(section, key, fallback=default)
    except ValueError:
        pass

    try:
        return configParser.getfloat(section, key, fallback=default)
    except ValueError:
        pass

    return configParser.get(section, key, fallback=default)


def set(key, value, section=section):
    if section != configParser.default_section and \
            not configParser.has_section(section):
        configParser.add_section(section)
    configParser.set(section, key, str(value))
    save()


def save():
    try:
        with open(path, "w", encoding=encoding) as config_file:
            configParser.write(config_file)
    except OSError as err:
        log.error(
            "Unable to save configuration to '%s' because of error: %s %s" %
            (path, err.__class__.__name__, ", ".join(
                str(a) for a in err.args)))


def hasKey(key, section=section):
    return configParser.has_option(section, key)
