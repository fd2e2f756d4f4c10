APP_NAME          = "AllHoops"
APP_ICON          = "🏀"

# Simulated auth
DEMO_EMAIL        = "user@example.com"
DEMO_USERNAME     = "DemoUser"
SENTINEL_PASSWORD = "password"
MIN_PASSWORD_LEN  = 6
GUEST_EMAIL       = "guest@example.com"
GUEST_USERNAME    = "Guest User"

# Albuquerque
DEFAULT_MAP_LAT   = 35.0844
DEFAULT_MAP_LON   = -106.6504

SEARCH_PLACEHOLDER = "Search games, teams, venues..."

# Fields the search box looks at
SEARCH_FIELDS = ["home_team", "away_team", "venue", "league"]
