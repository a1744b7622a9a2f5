"""Name resolution: player aliases, fuzzy matching and team lookups.

Lookups fold accents and case first, so "Dončić", "doncic" and "DONCIC" are
the same fragment. When several dictionary keys qualify, the first one in
dictionary order wins.
"""

from __future__ import annotations
import re
import unicodedata

from rapidfuzz.distance import Levenshtein

from data.players import PLAYER_ALIASES
from data.teams import TEAMS, TEAMS_BY_ABBREVIATION
from models import Team

MAX_FUZZY_DISTANCE = 2
MIN_FUZZY_LENGTH = 4  # fragments and keys of 3 chars or fewer never fuzzy-match
MIN_SUBSTRING_LENGTH = 2

# Common words that sit within two edits of a nickname ("game" -> "dame",
# "what" -> "shai", "during" -> "durant"). Never fuzzy-scanned.
FUZZY_STOPWORDS = frozenset("""
    about after again against also among another anyone around away back been before being best
    better between both came carry chat come compare could date days dave dead does doing done
    down during each east even ever fame from game games gave give going gone good have hello
    help here home hurry into just know lake lame last late leader leaders lead leads like line
    live look lost luck lucky made make many more most much name near need news next night none
    only other over play played player players playing please points rank recap record result
    results right said same score scores season seeding shall share shot shots show should since
    some sorry stand standing standings start stat stats steps still such summary take team teams
    tell than thank thanks that their them then there these they thing think this those time today
    tomorrow tonight took upon very want week well were west what when where which while will
    with would year years yesterday your
    agent award awards coach contract deadline draft free injury lottery race rookie roster
    rumor rumors salary trade trades trophy work works
    he she him his her the them it its team
""".split())

_TOKEN_RE = re.compile(r"[a-z0-9][a-z0-9'\-]*")


def fold(text: str) -> str:
    """Lowercase and strip accents: 'Dončić' -> 'doncic'."""
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(c for c in decomposed if not unicodedata.combining(c)).lower().strip()


def levenshtein(a: str, b: str) -> int:
    """Edit distance with unit costs for insert, delete and substitute."""
    return Levenshtein.distance(a, b)


def _phrase_re(phrase: str) -> re.Pattern:
    return re.compile(rf"(?<![a-z0-9]){re.escape(phrase)}(?![a-z0-9])")


def contains_phrase(text: str, phrase: str) -> bool:
    """True when `phrase` appears in `text` on word boundaries."""
    return bool(phrase) and _phrase_re(phrase).search(text) is not None


def _fuzzy_candidate(fragment: str) -> str | None:
    for key, name in PLAYER_ALIASES.items():
        if len(key) < MIN_FUZZY_LENGTH:
            continue
        if Levenshtein.distance(fragment, key, score_cutoff=MAX_FUZZY_DISTANCE) <= MAX_FUZZY_DISTANCE:
            return name
    return None


def lookup_player(fragment: str) -> str | None:
    """Resolve a name fragment to a canonical player name.

    Exact key first, then substring containment in either direction, then
    Levenshtein distance <= 2 for fragments longer than 3 characters.
    """
    if not fragment:
        return None
    frag = fold(fragment)
    if frag in PLAYER_ALIASES:
        return PLAYER_ALIASES[frag]

    if len(frag) < MIN_SUBSTRING_LENGTH or frag in FUZZY_STOPWORDS:
        return None

    for key, name in PLAYER_ALIASES.items():
        if contains_phrase(frag, key) or contains_phrase(key, frag):
            return name

    if len(frag) < MIN_FUZZY_LENGTH:
        return None
    return _fuzzy_candidate(frag)


def resolve_alias(fragment: str) -> str:
    """Canonical name when known, otherwise the fragment unchanged."""
    return lookup_player(fragment) or fragment


def find_alias_in_message(message: str) -> str | None:
    """First alias that appears as a whole word or phrase in the message."""
    text = fold(message)
    for key, name in PLAYER_ALIASES.items():
        if contains_phrase(text, key):
            return name
    return None


def tokenize(message: str) -> list[str]:
    tokens = []
    for tok in _TOKEN_RE.findall(fold(message)):
        if tok.endswith("'s"):
            tok = tok[:-2]
        tokens.append(tok.strip("'-"))
    return [t for t in tokens if t]


def _scannable(token: str) -> bool:
    return (
        len(token) >= MIN_FUZZY_LENGTH
        and token not in FUZZY_STOPWORDS
        and token not in TEAMS
        and not token.isdigit()
    )


def fuzzy_scan(message: str) -> str | None:
    """Fuzzy-match every token and adjacent token pair against the aliases."""
    tokens = tokenize(message)
    for tok in tokens:
        if _scannable(tok):
            name = _fuzzy_candidate(tok)
            if name:
                return name

    for first, second in zip(tokens, tokens[1:]):
        if first in FUZZY_STOPWORDS or second in FUZZY_STOPWORDS:
            continue
        bigram = f"{first} {second}"
        if bigram in TEAMS:
            continue
        name = _fuzzy_candidate(bigram)
        if name:
            return name
    return None


def find_team(message: str) -> Team | None:
    """First team whose directory key appears in the message."""
    text = fold(message)
    for key, team in TEAMS.items():
        if contains_phrase(text, key):
            return team
    return None


def lookup_team(fragment: str) -> Team | None:
    """Resolve a key, full name, abbreviation or mascot to a team."""
    if not fragment:
        return None
    frag = fold(fragment)
    if frag in TEAMS:
        return TEAMS[frag]
    team = TEAMS_BY_ABBREVIATION.get(frag.upper())
    if team:
        return team
    for team in TEAMS.values():
        name = team.name.lower()
        if frag == name or frag == name.rsplit(" ", 1)[-1]:
            return team
    return None
