import datetime as dt
import time as t
from calendar import day_name, month_name

YMD = '%Y-%m-%d'
# year and week number, with weeks starting on sunday (00-53)
YW = '%Y-%U'


def format_date(date):
    return date.strftime(YMD)


def to_date(value, none=False):
    if none and value is None:
        return None
    if isinstance(value, dt.datetime):
        return value.date()
    elif isinstance(value, dt.date):
        return value
    elif isinstance(value, int):
        return dt.date.fromordinal(value)
    else:
        try:
            return dt.date(*t.strptime(value, YMD)[:3])
        except ValueError:
            raise ValueError('Cannot parse "%s" as a date' % value)


def week_key(date):
    '''
    A string identifying the calendar week that contains the date, as YYYY-WW.

    Days before the first sunday of a year fall in week 00, so a week that
    spans new year has two keys (one in each year).
    '''
    return to_date(date).strftime(YW)


def day_of_week(date):
    return day_name[to_date(date).weekday()]


def month(date):
    return month_name[to_date(date).month]
