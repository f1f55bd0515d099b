from collections import namedtuple
from logging import getLogger

import pandas as pd

from .names import COLUMNS, DATE, STRESS_LEVEL, TEXT_COLUMNS
from ..lib.date import to_date

log = getLogger(__name__)


Entry = namedtuple('Entry', 'date, day_of_week, month, mood, specific_emotions, stress_level, notes')


class Journal:
    '''
    The full sequence of entries, in the order they were added.

    Entries are only ever appended.  A typed DataFrame (one row per entry, columns as
    in the file) is built on demand for aggregation and display.
    '''

    def __init__(self, entries=None):
        self.__entries = list(entries or [])

    def append(self, entry):
        self.__entries.append(entry)
        log.debug(f'Journal now has {len(self)} entries')

    def __len__(self):
        return len(self.__entries)

    def __iter__(self):
        return iter(self.__entries)

    def __getitem__(self, index):
        return self.__entries[index]

    def frame(self):
        return entries_to_frame(self.__entries)

    @classmethod
    def from_frame(cls, df):
        return cls(frame_to_entries(df))


def entries_to_frame(entries):
    df = pd.DataFrame.from_records([tuple(entry) for entry in entries], columns=COLUMNS)
    df[DATE] = pd.to_datetime(df[DATE])
    df[STRESS_LEVEL] = pd.array([entry.stress_level for entry in entries], dtype='Int64')
    for name in TEXT_COLUMNS:
        df[name] = df[name].astype(object)
    return df


def frame_to_entries(df):
    return [Entry(date=to_date(row[0]),
                  day_of_week=row[1],
                  month=row[2],
                  mood=row[3],
                  specific_emotions=row[4],
                  stress_level=None if pd.isna(row[5]) else int(row[5]),
                  notes=row[6])
            for row in df[list(COLUMNS)].itertuples(index=False, name=None)]
