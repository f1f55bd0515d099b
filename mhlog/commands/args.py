from argparse import ArgumentParser
from logging import getLogger
from os import makedirs
from os.path import dirname, exists, expanduser, realpath, normpath, isabs, join
from re import compile, sub
from typing import Mapping

log = getLogger(__name__)

MHLOG_VERSION = '0.1.0'

PROGNAME = 'mhlog'
COMMAND = 'command'
TOPIC = 'topic'

H, HELP = 'h', 'help'
MENU = 'menu'
PLOT = 'plot'
SHOW = 'show'
WEEKLY = 'weekly'

DEV = 'dev'
F, FILE = 'f', 'file'
L, LOG = 'l', 'log'
LOGS = 'logs'
O, OUTPUT = 'o', 'output'
ROOT = 'root'
V, VERBOSITY = 'v', 'verbosity'
VERSION = 'version'


def mm(name): return '--' + name
def m(name): return '-' + name


VARIABLE = compile(r'(.*(?:[^$]|^))\${(\w+)\}(.*)')


class NamespaceWithVariables(Mapping):
    '''
    Wrap the argparse namespace so that values can refer to each other
    (eg `${root}/mental_health_log.csv`) and relative paths are resolved
    against the root directory.
    '''

    def __init__(self, ns):
        self._dict = vars(ns)

    def __getitem__(self, name):
        try:
            value = self._dict[name]
        except KeyError:
            value = self._dict[sub('-', '_', name)]
        try:
            match = VARIABLE.match(value)
            while match:
                value = match.group(1) + self[match.group(2)] + match.group(3)
                match = VARIABLE.match(value)
            return sub(r'\$\$', '$', value)
        except TypeError:
            return value

    def path(self, name, rooted=True):
        path = expanduser(self[name])
        if rooted and not isabs(path) and name != ROOT:
            path = join(self.path(ROOT), path)
        return realpath(normpath(path))

    def file(self, name, rooted=True):
        file = self.path(name, rooted=rooted)
        path = dirname(file)
        if not exists(path):
            makedirs(path)
        return file

    def dir(self, name, rooted=True):
        path = self.path(name, rooted=rooted)
        if not exists(path):
            makedirs(path)
        return path

    def __iter__(self):
        return iter(self._dict)

    def __len__(self):
        return len(self._dict)


def parsers():
    '''
    The main parser and the sub-command parsers (by name).
    '''

    parser = ArgumentParser(prog=PROGNAME, description='a daily mental health journal')

    parser.add_argument(m(F), mm(FILE), action='store', default='${root}/mental_health_log.csv', metavar='FILE',
                        help='the journal file')
    parser.add_argument(mm(DEV), action='store_true', help='show stack trace on error')
    parser.add_argument(mm(LOGS), action='store', default='logs', metavar='DIR',
                        help='the directory for logs')
    parser.add_argument(m(L), mm(LOG), action='store', metavar='FILE',
                        help='the file for the log (command name by default)')
    parser.add_argument(mm(ROOT), action='store', default='~/.mhlog', metavar='DIR',
                        help='the root directory for the journal and logs')
    parser.add_argument(m(V), mm(VERBOSITY), action='store', nargs=1, default=None, type=int, metavar='VERBOSITY',
                        help='output level for stderr (0: silent; 5:noisy)')
    parser.add_argument(m(V.upper()), mm(VERSION), action='version', version=MHLOG_VERSION,
                        help='display version and exit')

    subparsers = parser.add_subparsers(title='commands', dest=COMMAND)

    help = subparsers.add_parser(HELP, help='display help')
    help.add_argument(TOPIC, action='store', nargs='?', metavar=TOPIC,
                      help='the subject for help')

    subparsers.add_parser(MENU, help='add and view entries interactively (default)')

    plot = subparsers.add_parser(PLOT, help='plot the weekly stress trend')
    plot.add_argument(m(O), mm(OUTPUT), action='store', metavar='FILE',
                      help='write the plot to an image file instead of displaying it')

    subparsers.add_parser(SHOW, help='print all entries')

    subparsers.add_parser(WEEKLY, help='print weekly average stress')

    parser.set_defaults(command=MENU)

    return parser, subparsers.choices


def parser():
    return parsers()[0]


def bootstrap_dir(dir, *args):

    from ..lib.log import make_log

    args = [mm(ROOT), dir] + list(args)
    args = NamespaceWithVariables(parser().parse_args(args))
    make_log(args)

    return args
