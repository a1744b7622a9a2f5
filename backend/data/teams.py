"""NBA team directory: lookup key -> team identity.

Keys are lowercase nicknames, short forms and unambiguous city names. Several
keys can point at the same Team.
"""

from models import Team

_LOGO = "https://a.espncdn.com/i/teamlogos/nba/500/{}.png"


def _team(team_id: str, name: str, abbreviation: str, logo_code: str) -> Team:
    return Team(id=team_id, name=name, abbreviation=abbreviation, logo=_LOGO.format(logo_code))


_LAL = _team("13", "Los Angeles Lakers", "LAL", "lal")
_BOS = _team("2", "Boston Celtics", "BOS", "bos")
_GSW = _team("9", "Golden State Warriors", "GSW", "gs")
_CHI = _team("4", "Chicago Bulls", "CHI", "chi")
_MIA = _team("14", "Miami Heat", "MIA", "mia")
_BKN = _team("17", "Brooklyn Nets", "BKN", "bkn")
_NYK = _team("18", "New York Knicks", "NYK", "ny")
_DEN = _team("7", "Denver Nuggets", "DEN", "den")
_PHX = _team("21", "Phoenix Suns", "PHX", "phx")
_DAL = _team("6", "Dallas Mavericks", "DAL", "dal")
_MIL = _team("15", "Milwaukee Bucks", "MIL", "mil")
_PHI = _team("20", "Philadelphia 76ers", "PHI", "phi")
_LAC = _team("12", "Los Angeles Clippers", "LAC", "lac")
_OKC = _team("25", "Oklahoma City Thunder", "OKC", "okc")
_CLE = _team("5", "Cleveland Cavaliers", "CLE", "cle")
_MIN = _team("16", "Minnesota Timberwolves", "MIN", "min")
_SAC = _team("23", "Sacramento Kings", "SAC", "sac")
_ATL = _team("1", "Atlanta Hawks", "ATL", "atl")
_CHA = _team("30", "Charlotte Hornets", "CHA", "cha")
_DET = _team("8", "Detroit Pistons", "DET", "det")
_IND = _team("11", "Indiana Pacers", "IND", "ind")
_ORL = _team("19", "Orlando Magic", "ORL", "orl")
_TOR = _team("28", "Toronto Raptors", "TOR", "tor")
_WAS = _team("27", "Washington Wizards", "WAS", "wsh")
_MEM = _team("29", "Memphis Grizzlies", "MEM", "mem")
_NOP = _team("3", "New Orleans Pelicans", "NOP", "no")
_SAS = _team("24", "San Antonio Spurs", "SAS", "sa")
_HOU = _team("10", "Houston Rockets", "HOU", "hou")
_UTA = _team("26", "Utah Jazz", "UTA", "utah")
_POR = _team("22", "Portland Trail Blazers", "POR", "por")

TEAMS: dict[str, Team] = {
    "lakers": _LAL,
    "celtics": _BOS,
    "boston": _BOS,
    "warriors": _GSW,
    "golden state": _GSW,
    "dubs": _GSW,
    "bulls": _CHI,
    "chicago": _CHI,
    "heat": _MIA,
    "miami": _MIA,
    "nets": _BKN,
    "brooklyn": _BKN,
    "knicks": _NYK,
    "nuggets": _DEN,
    "denver": _DEN,
    "suns": _PHX,
    "phoenix": _PHX,
    "mavericks": _DAL,
    "mavs": _DAL,
    "dallas": _DAL,
    "bucks": _MIL,
    "milwaukee": _MIL,
    "76ers": _PHI,
    "sixers": _PHI,
    "philadelphia": _PHI,
    "clippers": _LAC,
    "thunder": _OKC,
    "okc": _OKC,
    "cavaliers": _CLE,
    "cavs": _CLE,
    "cleveland": _CLE,
    "timberwolves": _MIN,
    "wolves": _MIN,
    "minnesota": _MIN,
    "kings": _SAC,
    "sacramento": _SAC,
    "hawks": _ATL,
    "atlanta": _ATL,
    "hornets": _CHA,
    "charlotte": _CHA,
    "pistons": _DET,
    "detroit": _DET,
    "pacers": _IND,
    "indiana": _IND,
    "magic": _ORL,
    "orlando": _ORL,
    "raptors": _TOR,
    "toronto": _TOR,
    "wizards": _WAS,
    "washington": _WAS,
    "grizzlies": _MEM,
    "grizz": _MEM,
    "memphis": _MEM,
    "pelicans": _NOP,
    "pels": _NOP,
    "new orleans": _NOP,
    "spurs": _SAS,
    "san antonio": _SAS,
    "rockets": _HOU,
    "houston": _HOU,
    "jazz": _UTA,
    "utah": _UTA,
    "blazers": _POR,
    "trail blazers": _POR,
    "trailblazers": _POR,
    "portland": _POR,
}

TEAMS_BY_ABBREVIATION: dict[str, Team] = {t.abbreviation: t for t in TEAMS.values()}
