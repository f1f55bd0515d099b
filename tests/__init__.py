from logging import getLogger
from tempfile import mkdtemp
from unittest import TestCase

from mhlog.commands.args import bootstrap_dir, m, V
from mhlog.data.journal import Entry, Journal
from mhlog.lib.date import to_date, day_of_week, month

log = getLogger(__name__)


class LogTestCase(TestCase):

    def setUp(self):
        # logging is configured once per process, so the log directory outlives the test
        bootstrap_dir(mkdtemp(prefix='mhlog-test-'), m(V), '5')


def make_entry(date, stress_level, mood='Neutral', specific_emotions='', notes=''):
    date = to_date(date)
    return Entry(date=date, day_of_week=day_of_week(date), month=month(date), mood=mood,
                 specific_emotions=specific_emotions, stress_level=stress_level, notes=notes)


def make_journal(*pairs):
    '''
    A journal from (date, stress) pairs.
    '''
    return Journal(make_entry(date, stress) for date, stress in pairs)
