import datetime as dt
from os import listdir
from os.path import join, exists
from tempfile import TemporaryDirectory

from mhlog.data.journal import Journal
from mhlog.data.store import Store, CorruptLog
from tests import LogTestCase, make_entry


class TestStore(LogTestCase):

    def test_missing(self):
        with TemporaryDirectory() as d:
            store = Store(join(d, 'log.csv'))
            journal = store.load()
            self.assertEqual(len(journal), 0)
            self.assertEqual(list(journal.frame().columns),
                             ['Date', 'DayOfWeek', 'Month', 'OverallMood', 'SpecificEmotions', 'StressLevel', 'Notes'])
            self.assertFalse(exists(store.path))

    def test_round_trip(self):
        entries = [make_entry('2024-07-01', 2, mood='Happy', specific_emotions='joy, calm', notes='a "good" day'),
                   make_entry('2024-07-02', None, mood='Sad'),
                   make_entry('2024-07-03', 5, mood='Overwhelmed', notes='deadline,\nthen more')]
        with TemporaryDirectory() as d:
            store = Store(join(d, 'log.csv'))
            store.save(Journal(entries))
            self.assertEqual(list(store.load()), entries)

    def test_file_format(self):
        with TemporaryDirectory() as d:
            store = Store(join(d, 'log.csv'))
            store.save(Journal([make_entry('2024-07-01', 3, mood='Calm', specific_emotions='relief, joy')]))
            with open(store.path) as input:
                lines = input.read().splitlines()
            self.assertEqual(lines[0], 'Date,DayOfWeek,Month,OverallMood,SpecificEmotions,StressLevel,Notes')
            self.assertEqual(lines[1], '2024-07-01,Monday,July,Calm,"relief, joy",3,')
            self.assertEqual(listdir(d), ['log.csv'])

    def test_overwrite(self):
        with TemporaryDirectory() as d:
            store = Store(join(d, 'log.csv'))
            journal = Journal([make_entry('2024-07-01', 3)])
            store.save(journal)
            journal.append(make_entry('2024-07-02', 4))
            store.save(journal)
            loaded = store.load()
            self.assertEqual(len(loaded), 2)
            self.assertEqual(loaded[1].date, dt.date(2024, 7, 2))

    def test_empty_round_trip(self):
        with TemporaryDirectory() as d:
            store = Store(join(d, 'sub', 'log.csv'))
            store.save(Journal())
            self.assertTrue(exists(store.path))
            self.assertEqual(len(store.load()), 0)

    def test_quoted_with_na(self):
        with TemporaryDirectory() as d:
            path = join(d, 'log.csv')
            with open(path, 'w') as output:
                output.write('"Date","DayOfWeek","Month","OverallMood","SpecificEmotions","StressLevel","Notes"\n'
                             '"2024-07-01","Monday","July","Happy","joy, calm",2,"good day"\n'
                             '"2024-07-02","Tuesday","July","Sad","",NA,""\n')
            journal = Store(path).load()
            self.assertEqual(len(journal), 2)
            self.assertEqual(journal[0], make_entry('2024-07-01', 2, mood='Happy', specific_emotions='joy, calm',
                                                    notes='good day'))
            self.assertEqual(journal[1], make_entry('2024-07-02', None, mood='Sad'))

    def test_bad_columns(self):
        with TemporaryDirectory() as d:
            path = join(d, 'log.csv')
            with open(path, 'w') as output:
                output.write('Date,Mood\n2024-07-01,Happy\n')
            with self.assertRaises(CorruptLog):
                Store(path).load()

    def test_bad_date(self):
        with TemporaryDirectory() as d:
            path = join(d, 'log.csv')
            with open(path, 'w') as output:
                output.write('Date,DayOfWeek,Month,OverallMood,SpecificEmotions,StressLevel,Notes\n'
                             'yesterday,Monday,July,Happy,,2,\n')
            with self.assertRaises(CorruptLog):
                Store(path).load()

    def test_bad_stress(self):
        with TemporaryDirectory() as d:
            path = join(d, 'log.csv')
            with open(path, 'w') as output:
                output.write('Date,DayOfWeek,Month,OverallMood,SpecificEmotions,StressLevel,Notes\n'
                             '2024-07-01,Monday,July,Happy,,high,\n')
            with self.assertRaises(CorruptLog):
                Store(path).load()
