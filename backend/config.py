import os
from dotenv import load_dotenv

load_dotenv()

# --- API Keys ---
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY", "")

# --- LLM ---
# Any OpenAI-compatible endpoint works (e.g. Gemini's /v1beta/openai/).
LLM_BASE_URL = os.getenv("LLM_BASE_URL") or None
# Ordered fallback list; the sticky cursor walks it left to right.
LLM_MODELS = [
    m.strip()
    for m in os.getenv("LLM_MODELS", "gpt-4.1-mini,gpt-4o-mini,gpt-4.1-nano").split(",")
    if m.strip()
]
LLM_TIMEOUT = float(os.getenv("LLM_TIMEOUT", "30"))
LLM_SEND_SAFETY_SETTINGS = os.getenv("LLM_SEND_SAFETY_SETTINGS", "").lower() in ("1", "true", "yes")
LLM_SAFETY_SETTINGS = [
    {"category": "HARM_CATEGORY_HARASSMENT", "threshold": "BLOCK_ONLY_HIGH"},
    {"category": "HARM_CATEGORY_HATE_SPEECH", "threshold": "BLOCK_ONLY_HIGH"},
    {"category": "HARM_CATEGORY_SEXUALLY_EXPLICIT", "threshold": "BLOCK_MEDIUM_AND_ABOVE"},
    {"category": "HARM_CATEGORY_DANGEROUS_CONTENT", "threshold": "BLOCK_MEDIUM_AND_ABOVE"},
]

# --- External API URLs ---
ESPN_SITE_BASE = "https://site.api.espn.com/apis/site/v2/sports/basketball/nba"
ESPN_STANDINGS_URL = "https://site.api.espn.com/apis/v2/sports/basketball/nba/standings"
ESPN_COMMON_BASE = "https://site.web.api.espn.com/apis/common/v3"
ESPN_LOGO_URL = "https://a.espncdn.com/i/teamlogos/nba/500/{abbr}.png"
ESPN_HEADSHOT_URL = "https://a.espncdn.com/i/headshots/nba/players/full/{player_id}.png"
ESPN_FALLBACK_URL = "https://www.espn.com/nba/"

DATA_SOURCE = "ESPN API"
DATA_SOURCE_UNAVAILABLE = "ESPN API (unavailable)"

# --- HTTP ---
HTTP_TIMEOUT = 15  # seconds, total per provider request
USER_AGENT = "CourtsideChat/1.0"

# --- Cache TTLs (seconds) ---
CACHE_TTL_PLAYERS = 300     # 5 minutes for player search + season stats

# --- Server ---
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
CORS_ORIGINS = [
    o.strip()
    for o in os.getenv("CORS_ORIGINS", "http://localhost:3000,http://localhost:3001").split(",")
    if o.strip()
]
CHAT_RATE_LIMIT = os.getenv("CHAT_RATE_LIMIT", "20/minute")

# --- User-facing fallbacks ---
APOLOGY_MESSAGE = f"I hit a snag! 🏀 Check ESPN.com for the latest: {ESPN_FALLBACK_URL}"
BAD_REQUEST_MESSAGE = "I couldn't understand your request. Please try again!"
NO_MODEL_WITH_VISUAL = "Here's what I found! Check out the data above. 📊"
NO_MODEL_WITHOUT_VISUAL = "I'm having trouble connecting to my brain right now!"


def logo_url(abbreviation: str) -> str:
    """ESPN CDN logo for a team abbreviation."""
    if not abbreviation:
        return ""
    return ESPN_LOGO_URL.format(abbr=abbreviation.lower())
