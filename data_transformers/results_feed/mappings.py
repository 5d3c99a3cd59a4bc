"""
Results Feed Mappings

Key paths into the page-data document served by the results site.
"""
from constants import MEDAL_CLASSES

# pageProps → gameDiscipline → events
EVENTS_PATH = ("pageProps", "gameDiscipline", "events")

# Per-event list of medals
AWARDS_KEY = "awards"
MEDAL_TYPE_KEY = "medalType"
PARTICIPANT_KEY = "participant"

# Team/country entrants carry countryObject; some documents use country
# instead. Individual athletes without either fall back to title.
COUNTRY_KEYS = ("countryObject", "country")
COUNTRY_NAME_KEY = "name"
TITLE_KEY = "title"

# Feed medalType → MedalClass
MEDAL_TYPE_MAP = MEDAL_CLASSES
