from logging import getLogger
from os import makedirs, replace, close, unlink
from os.path import exists, dirname
from tempfile import mkstemp

import pandas as pd

from .journal import Journal, entries_to_frame
from .names import COLUMNS, DATE, STRESS_LEVEL, TEXT_COLUMNS, OVERALL_MOOD, MOODS, MIN_STRESS, MAX_STRESS
from .. import FatalException
from ..lib.date import YMD

log = getLogger(__name__)

# written by other programs for a missing stress level
MISSING = ('', 'NA')


class CorruptLog(FatalException):
    pass


class Store:
    '''
    The journal on disk, as CSV with a header row.

    The whole journal is written on every save (to a temporary file that then
    replaces the original).
    '''

    def __init__(self, path):
        self.path = path

    def load(self):
        if exists(self.path):
            journal = Journal.from_frame(self.read_frame())
            log.info('Existing mental health log loaded.')
            log.debug(f'Read {len(journal)} entries from {self.path}')
        else:
            journal = Journal()
            log.info('New mental health log created.')
        return journal

    def read_frame(self):
        try:
            # read verbatim, so empty text is '' rather than missing
            df = pd.read_csv(self.path, dtype=str, keep_default_na=False)
        except (pd.errors.ParserError, pd.errors.EmptyDataError, ValueError) as e:
            raise CorruptLog(f'Could not read {self.path}: {e}')
        if tuple(df.columns) != COLUMNS:
            raise CorruptLog(f'Unexpected columns in {self.path}: {", ".join(df.columns)} '
                             f'(expected {", ".join(COLUMNS)})')
        try:
            df[DATE] = pd.to_datetime(df[DATE], format=YMD)
        except ValueError as e:
            raise CorruptLog(f'Bad date in {self.path}: {e}')
        if df[DATE].isna().any():
            raise CorruptLog(f'Missing date in {self.path}')
        stress = df[STRESS_LEVEL]
        try:
            df[STRESS_LEVEL] = pd.to_numeric(stress.where(~stress.isin(MISSING))).astype('Int64')
        except (TypeError, ValueError) as e:
            raise CorruptLog(f'Bad stress level in {self.path}: {e}')
        for name in TEXT_COLUMNS:
            df[name] = df[name].astype(object)
        self._check_values(df)
        return df

    def _check_values(self, df):
        stress = df[STRESS_LEVEL].dropna()
        n = int(((stress < MIN_STRESS) | (stress > MAX_STRESS)).sum())
        if n:
            log.warning(f'{n} entries in {self.path} have a stress level outside {MIN_STRESS}-{MAX_STRESS}')
        n = int((~df[OVERALL_MOOD].isin(MOODS)).sum())
        if n:
            log.warning(f'{n} entries in {self.path} have an unknown mood')

    def save(self, journal):
        df = entries_to_frame(journal)
        df[DATE] = df[DATE].dt.strftime(YMD)
        dir = dirname(self.path) or '.'
        makedirs(dir, exist_ok=True)
        fd, tmp = mkstemp(dir=dir, prefix='.', suffix='.tmp')
        close(fd)
        try:
            df.to_csv(tmp, index=False)
            replace(tmp, self.path)
        except Exception:
            unlink(tmp)
            raise
        log.info('Mental health log saved.')
        log.debug(f'Wrote {len(journal)} entries to {self.path}')
