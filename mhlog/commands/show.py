from logging import getLogger

import pandas as pd

from ..data.names import DATE
from ..lib.date import YMD
from ..lib.io import Console, terminal_width

log = getLogger(__name__)

EMPTY = 'Your log is currently empty. Add an entry!'


def show(args, store, console=None):
    '''
## show

    > mhlog show

Print every entry in the journal, oldest first, as a table.
    '''
    print_journal(store.load(), console or Console())


def print_journal(journal, console):
    console.print('\n--- Your Mental Health Log ---')
    if not len(journal):
        console.print(EMPTY)
    else:
        df = journal.frame()
        df[DATE] = df[DATE].dt.strftime(YMD)
        df.index = range(1, len(df) + 1)
        with pd.option_context('display.max_rows', None, 'display.max_columns', None,
                               'display.width', terminal_width()):
            console.print(df.to_string())
