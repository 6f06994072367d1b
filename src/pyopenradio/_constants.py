"""Internal constants shared across the library."""

#: ``sortId`` value of a station that has not been given a position yet.
UNKNOWN_SORT_ID = -1

FAVORITES_NAMESPACE = "FavoritesPreferences"
LATEST_NAMESPACE = "LatestRadioStationPreferences"
LATEST_STATION_KEY = "LatestRadioStationKey"

# ------------------------------------------------------------------
# Media ids
# ------------------------------------------------------------------

#: Prefixes that mark a media id as coming from a search flow.
SEARCH_ID_PREFIXES: tuple[str, ...] = ("search_", "__SEARCH_FROM_APP__")

# ------------------------------------------------------------------
# Media buttons
# ------------------------------------------------------------------

MEDIA_BUTTON_ACTION = "android.intent.action.MEDIA_BUTTON"
