from .entry import build_entry, parse_mood, parse_stress
from .journal import Entry, Journal, entries_to_frame, frame_to_entries
from .store import Store, CorruptLog
from .weekly import weekly_stress, overall_stress, InsufficientData
