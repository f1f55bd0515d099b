from logging import getLogger
from sys import version_info, exit


class FatalException(Exception):

    '''
    Base class for exceptions that we can't ignore at some higher level
    (fundamental things like a corrupt journal).
    '''

    pass


from .commands.args import COMMAND, parser, NamespaceWithVariables, PROGNAME, HELP, DEV, FILE, MENU, PLOT, SHOW, \
    WEEKLY, MHLOG_VERSION
from .commands.help import help
from .commands.menu import menu
from .commands.plot import plot
from .commands.show import show
from .commands.weekly import weekly
from .data.store import Store
from .lib.log import make_log, log_current_exception

log = getLogger(__name__)


COMMANDS = {HELP: help,
            MENU: menu,
            PLOT: plot,
            SHOW: show,
            WEEKLY: weekly,
            }


def main():
    args = NamespaceWithVariables(parser().parse_args())
    command_name = args[COMMAND] if COMMAND in args else MENU
    command = COMMANDS[command_name]
    make_log(args)
    log.info('Version %s' % MHLOG_VERSION)
    if version_info < (3, 7):
        raise Exception('Please use Python 3.7 or more recent')
    try:
        command(args, Store(args.file(FILE)))
    except KeyboardInterrupt:
        log.critical('User abort')
        exit(1)
    except Exception as e:
        log.critical(e)
        log_current_exception()
        log.info('See `%s %s` for available commands.' % (PROGNAME, HELP))
        if args[DEV]:
            raise
        exit(2)
