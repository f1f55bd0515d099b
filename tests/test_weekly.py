from io import StringIO

from mhlog.commands.weekly import print_weekly, NOT_ENOUGH
from mhlog.data.journal import Journal
from mhlog.data.weekly import weekly_stress, overall_stress, InsufficientData
from mhlog.lib.date import week_key
from mhlog.lib.io import Console
from tests import LogTestCase, make_journal


class TestWeekly(LogTestCase):

    def test_week_key(self):
        self.assertEqual(week_key('2024-01-06'), '2024-00')  # saturday before the first sunday
        self.assertEqual(week_key('2024-01-07'), '2024-01')
        self.assertEqual(week_key('2024-01-13'), '2024-01')
        self.assertEqual(week_key('2024-01-14'), '2024-02')

    def test_two_weeks(self):
        journal = make_journal(('2024-01-07', 1), ('2024-01-08', 3), ('2024-01-09', 5),
                               ('2024-01-14', 2), ('2024-01-16', 4))
        stress = weekly_stress(journal.frame())
        self.assertEqual(list(stress.index), ['2024-01', '2024-02'])
        self.assertEqual(list(stress.values), [3.0, 3.0])

    def test_insufficient(self):
        with self.assertRaises(InsufficientData):
            weekly_stress(Journal().frame())
        with self.assertRaises(InsufficientData):
            weekly_stress(make_journal(('2024-01-07', 1)).frame())

    def test_missing_stress(self):
        journal = make_journal(('2024-01-07', 2), ('2024-01-08', None), ('2024-01-14', None), ('2024-01-21', 5))
        stress = weekly_stress(journal.frame())
        self.assertEqual(list(stress.index), ['2024-01', '2024-03'])
        self.assertEqual(list(stress.values), [2.0, 5.0])
        self.assertAlmostEqual(overall_stress(journal.frame()), 3.5)

    def test_no_stress(self):
        with self.assertRaises(InsufficientData):
            weekly_stress(make_journal(('2024-01-07', None), ('2024-01-08', None)).frame())

    def test_new_year(self):
        journal = make_journal(('2025-01-05', 4), ('2024-12-30', 2), ('2025-01-02', 3))
        stress = weekly_stress(journal.frame())
        self.assertEqual(list(stress.index), ['2024-52', '2025-00', '2025-01'])
        self.assertEqual(list(stress.values), [2.0, 3.0, 4.0])

    def test_print(self):
        output = StringIO()
        print_weekly(make_journal(('2024-01-07', 1), ('2024-01-08', 4)), Console(input=StringIO(), output=output))
        text = output.getvalue()
        self.assertIn('2024-01', text)
        self.assertIn('2.5', text)
        self.assertIn('Overall Avg: 2.5', text)

    def test_print_insufficient(self):
        output = StringIO()
        print_weekly(Journal(), Console(input=StringIO(), output=output))
        self.assertIn(NOT_ENOUGH, output.getvalue())
