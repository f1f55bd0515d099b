from .date import format_date, to_date, week_key, day_of_week, month
from .io import Console, terminal_width
