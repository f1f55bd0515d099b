import sys
from logging import getLogger
from textwrap import fill

from .args import TOPIC, parsers
from ..lib.io import terminal_width

log = getLogger(__name__)


def help(args, store, stream=None):
    '''
## help

    > mhlog help [topic]

With a command name as topic, shows that command's options followed by a
description.  Otherwise, lists the commands.

### Examples

    > mhlog help plot

Describes the plot command.
    '''
    from .. import COMMANDS
    stream = stream or sys.stdout
    main, commands = parsers()
    topic = args[TOPIC]
    if topic in COMMANDS:
        print(commands[topic].format_help(), file=stream)
        for para in paragraphs(COMMANDS[topic].__doc__, terminal_width() - 1):
            print(para, file=stream)
    else:
        print(main.format_help(), file=stream)


def paragraphs(doc, width):
    '''
    Split a command docstring on blank lines.  Indented blocks (usage examples) are
    kept as written, bullets are wrapped with a hanging indent, and the rest is filled.
    '''
    for block in doc.strip('\n').rstrip().split('\n\n'):
        if block.startswith(' '):
            yield block.rstrip()
        elif block.startswith('* '):
            yield '\n'.join(fill(bullet, width, subsequent_indent='  ')
                            for bullet in ('* ' + item for item in block[2:].split('\n* ')))
        else:
            yield fill(block, width)
        yield ''
