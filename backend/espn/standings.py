import logging

from config import ESPN_STANDINGS_URL
from espn.normalize import parse_standings
from models import Standings
from utils import fetch_json

logger = logging.getLogger(__name__)


async def fetch_standings() -> Standings:
    data = await fetch_json(ESPN_STANDINGS_URL)
    standings = parse_standings(data)
    logger.info("[espn] standings: %d east, %d west", len(standings.east), len(standings.west))
    return standings
