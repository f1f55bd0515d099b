from logging import getLogger

from .plot import plot_journal
from .show import print_journal
from ..data.entry import build_entry
from ..lib.io import Console
from ..lib.log import log_current_exception

log = getLogger(__name__)

ADD, VIEW, PLOT, EXIT = 1, 2, 3, 4

MENU_TEXT = '''
--- Mental Health Tracker Menu ---
1. Add a new daily entry
2. View my mental health log
3. Plot weekly mental state trend
4. Exit'''
PROMPT = 'Enter your choice (1-4): '


def menu(args, store, console=None):
    '''
## menu

    > mhlog [menu]

The interactive journal (this is the default command).  Choose from:

* Add a new daily entry (mood, emotions, stress 1-5, notes), saved immediately.
* View the journal.
* Plot the weekly stress trend.
* Exit.
    '''
    run_menu(store, console or Console())


def run_menu(store, console, date=None):
    '''
    Loop until the user exits (or input ends), returning the journal.

    The journal is loaded once and saved in full after each new entry.  A failure
    while plotting is logged and the menu continues.
    '''
    journal = store.load()
    try:
        while True:
            console.print(MENU_TEXT)
            choice = read_choice(console)
            if choice == ADD:
                journal.append(build_entry(console, date=date))
                store.save(journal)
                console.print('Entry added successfully.')
            elif choice == VIEW:
                print_journal(journal, console)
            elif choice == PLOT:
                try:
                    plot_journal(journal, console)
                except Exception as e:
                    log.error(f'Could not plot weekly trend: {e}')
                    log_current_exception()
            elif choice == EXIT:
                break
    except EOFError:
        log.debug('End of input')
    console.print('Exiting Mental Health Tracker. Goodbye!')
    return journal


def read_choice(console):
    '''
    The menu choice, or None (after displaying a message) if the input is not valid.
    '''
    text = console.read(PROMPT)
    try:
        choice = int(text)
    except ValueError:
        console.print('Invalid input. Please enter a number.')
        return None
    if not ADD <= choice <= EXIT:
        console.print(f'Invalid choice. Please enter {ADD}, {VIEW}, {PLOT}, or {EXIT}.')
        return None
    return choice
