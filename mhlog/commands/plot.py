from logging import getLogger

from .args import OUTPUT
from .weekly import NOT_ENOUGH
from ..data.weekly import weekly_stress, overall_stress, InsufficientData
from ..lib.io import Console

log = getLogger(__name__)


def plot(args, store, console=None):
    '''
## plot

    > mhlog plot [-o FILE]

Plot the average stress level for each week, with a reference line at the
overall average.  The plot is displayed using the matplotlib backend or, with
-o, written to FILE (format from the extension, eg .png, .pdf).

At least two entries are needed.
    '''
    plot_journal(store.load(), console or Console(), output=args[OUTPUT])


def plot_journal(journal, console, output=None):
    df = journal.frame()
    try:
        stress = weekly_stress(df)
    except InsufficientData as e:
        log.debug(e)
        console.print(f'\n{NOT_ENOUGH}')
        return False
    from ..data.plot import weekly_stress_plot, show_or_save
    fig = weekly_stress_plot(stress, float(overall_stress(df)))
    show_or_save(fig, output=output)
    console.print('\nWeekly mental state trend plot generated.')
    return True
