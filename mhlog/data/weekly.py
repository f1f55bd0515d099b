from logging import getLogger

from .names import DATE, STRESS_LEVEL, WEEK, AVERAGE_STRESS
from ..lib.date import YW

log = getLogger(__name__)

MIN_ENTRIES = 2


class InsufficientData(Exception):
    pass


def weekly_stress(df):
    '''
    Mean stress level for each week, as a Series indexed by week key (YYYY-WW, weeks
    starting sunday), in key order.

    Missing stress levels are ignored.  A week with no stress levels at all has no row.
    At least MIN_ENTRIES rows, and some stress levels, are needed.
    '''
    if len(df) < MIN_ENTRIES:
        raise InsufficientData(f'Need at least {MIN_ENTRIES} entries (have {len(df)})')
    df = df.loc[df[STRESS_LEVEL].notna(), [DATE, STRESS_LEVEL]]
    if df.empty:
        raise InsufficientData('No stress levels recorded')
    weeks = df[DATE].dt.strftime(YW).rename(WEEK)
    stress = df[STRESS_LEVEL].astype(float).groupby(weeks).mean().sort_index()
    log.debug(f'{len(stress)} weeks from {len(df)} entries')
    return stress.rename(AVERAGE_STRESS)


def overall_stress(df):
    '''
    Mean stress level across all entries (NaN if there are none).
    '''
    return df[STRESS_LEVEL].astype(float).mean()
