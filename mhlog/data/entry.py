import datetime as dt
from logging import getLogger

from .journal import Entry
from .names import MOODS, MIN_STRESS, MAX_STRESS
from ..lib.date import format_date, day_of_week, month

log = getLogger(__name__)


def parse_mood(text):
    # exact match, so 'happy' is rejected
    if text not in MOODS:
        raise ValueError(f'Unknown mood "{text}"')
    return text


def parse_stress(text):
    stress = int(text)
    if not MIN_STRESS <= stress <= MAX_STRESS:
        raise ValueError(f'Stress level {stress} out of range')
    return stress


def build_entry(console, date=None):
    '''
    Ask for today's mood, emotions, stress and notes.  The entry is returned, not saved.
    '''
    date = date or dt.date.today()

    console.print('\n--- Add New Mental Health Entry ---')
    console.print(f"Today's Date: {format_date(date)}")

    mood = console.retry(f'Enter your overall mood (e.g., {", ".join(MOODS)}):',
                         parse_mood,
                         f'Invalid mood. Please choose from: {", ".join(MOODS)}')
    console.print('Enter specific emotions you felt today (e.g., tension, anxiety, joy, frustration - '
                  'comma-separated):')
    specific_emotions = console.read()
    stress_level = console.retry(f'Enter your stress level ({MIN_STRESS} = Very Low Stress/Very Positive, '
                                 f'{MAX_STRESS} = Very High Stress/Very Negative):',
                                 parse_stress,
                                 f'Invalid input. Please enter a number between {MIN_STRESS} and {MAX_STRESS}.')
    console.print('Enter any notes or reasons for your feelings today:')
    notes = console.read()

    entry = Entry(date=date, day_of_week=day_of_week(date), month=month(date), mood=mood,
                  specific_emotions=specific_emotions, stress_level=stress_level, notes=notes)
    log.debug(f'New entry for {format_date(date)}: {mood}, stress {stress_level}')
    return entry
