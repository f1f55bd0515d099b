
DATE = 'Date'
DAY_OF_WEEK = 'DayOfWeek'
MONTH = 'Month'
OVERALL_MOOD = 'OverallMood'
SPECIFIC_EMOTIONS = 'SpecificEmotions'
STRESS_LEVEL = 'StressLevel'
NOTES = 'Notes'

# order in the file and in the table view
COLUMNS = (DATE, DAY_OF_WEEK, MONTH, OVERALL_MOOD, SPECIFIC_EMOTIONS, STRESS_LEVEL, NOTES)
TEXT_COLUMNS = (DAY_OF_WEEK, MONTH, OVERALL_MOOD, SPECIFIC_EMOTIONS, NOTES)

WEEK = 'Week'
AVERAGE_STRESS = 'Average Stress'

MOODS = ('Happy', 'Neutral', 'Sad', 'Anxious', 'Angry', 'Calm', 'Energetic', 'Tired', 'Excited', 'Relaxed',
         'Stressed', 'Overwhelmed')

MIN_STRESS, MAX_STRESS = 1, 5
