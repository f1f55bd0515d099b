from logging import getLogger

from ..data.weekly import weekly_stress, overall_stress, InsufficientData
from ..lib.io import Console

log = getLogger(__name__)

NOT_ENOUGH = 'Not enough data to plot a weekly trend. Please add more entries.'


def weekly(args, store, console=None):
    '''
## weekly

    > mhlog weekly

Print the average stress level for each week (weeks start on Sunday and are
labelled YYYY-WW), followed by the overall average.
    '''
    print_weekly(store.load(), console or Console())


def print_weekly(journal, console):
    df = journal.frame()
    try:
        stress = weekly_stress(df)
    except InsufficientData as e:
        log.debug(e)
        console.print(f'\n{NOT_ENOUGH}')
        return
    console.print('\n--- Weekly Average Stress ---')
    console.print(stress.round(2).to_string())
    console.print(f'Overall Avg: {round(float(overall_stress(df)), 2)}')
