"""Prompt composition. Everything here is a pure function of its inputs."""

from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import TYPE_CHECKING

from models import ChatRequest, GameContext, VisualPayload
from visuals import normalize_season_pcts

if TYPE_CHECKING:
    from gather import DataBundle

BASE_PROMPT = """You are Courtside, a concise and accurate NBA assistant.

RULES:
- Be concise. Users want quick info, not essays.
- Use EXACT numbers from the data provided. Never invent stats.
- Lead with the score or result, then key performers.
- Skip filler words, headers and repetition.

FORMAT: Score first, then top performers, then one key insight."""

PERSONALITIES = {
    "default": "",
    "hype": (
        'STYLE: HIGH ENERGY! Caps for KEY STATS, 🔥 for hot streaks. Example: "Luka dropped '
        '45 POINTS! That\'s INSANE!" Keep the energy high and the numbers accurate.'
    ),
    "drunk": (
        'STYLE: Casual bar talk. "Oh Luka? Dude\'s averaging like 33 and 9, crazy right?" '
        "Loose language, still accurate numbers."
    ),
    "announcer": (
        'STYLE: Play-by-play broadcaster drama. "What a PERFORMANCE!" Spell out big numbers '
        'with gravitas: "Forty-five points, twelve assists." Phrases like "Down the stretch!"'
    ),
    "analyst": (
        "STYLE: Analytical. Lead with efficiency (TS%, eFG%, usage) and explain what the numbers "
        'mean: "His 61% true shooting ranks near the top of the league." Reference pace and context.'
    ),
}

LENGTHS = {
    "short": (80, "STRICT: 1-2 sentences ONLY. No headers, no bullets, no paragraphs."),
    "medium": (200, "STRICT: 3-5 sentences MAX. Score, 1-2 key performers, one insight. No headers or sections."),
    "long": (400, "Detailed but focused. Bullet points for stats. At most 2-3 short paragraphs."),
}

TEMPERATURES = {"analyst": 0.3, "hype": 0.9}
DEFAULT_TEMPERATURE = 0.7

BOXSCORE_LEADERS = 3


@dataclass(frozen=True)
class ComposedPrompt:
    text: str
    max_tokens: int
    temperature: float


def _game_line(g) -> str:
    line = f"{g.away_team.name} {g.away_team.score} @ {g.home_team.name} {g.home_team.score} [{g.status}]"
    if g.status in ("live", "halftime") and g.period:
        line += f" Q{g.period} {g.clock or ''}".rstrip()
    return line


def _player_line(p) -> str:
    return (
        f"    {p.name}: {p.points}pts, {p.rebounds}reb, {p.assists}ast, "
        f"{p.fgm}-{p.fga} FG, {p.fg3m}-{p.fg3a} 3PT, {p.minutes} min"
    )


def build_live_context(bundle: DataBundle) -> str:
    """Plain-text dump of the gathered data for the model."""
    lines: list[str] = []

    if bundle.games:
        lines.append(f"GAMES ({len(bundle.games)}):")
        for g in bundle.games:
            lines.append(f"  {_game_line(g)}")
            box = bundle.boxscores.get(g.game_id)
            if box:
                for players in (box.away_players, box.home_players):
                    for p in sorted(players, key=lambda p: p.points, reverse=True)[:BOXSCORE_LEADERS]:
                        lines.append(_player_line(p))
    elif bundle.scores_failed:
        lines.append("GAMES: live scores are unavailable right now.")
    else:
        lines.append("GAMES: none scheduled.")

    if bundle.recap_game:
        lines.append(f"RECAP GAME: {_game_line(bundle.recap_game)}")
        box = bundle.recap_boxscore
        if box:
            for players in (box.away_players, box.home_players):
                for p in sorted(players, key=lambda p: p.points, reverse=True)[:BOXSCORE_LEADERS]:
                    lines.append(_player_line(p))

    if bundle.standings:
        for label, entries in (("EAST", bundle.standings.east), ("WEST", bundle.standings.west)):
            if entries:
                table = ", ".join(f"{i}. {e.abbreviation} {e.wins}-{e.losses}" for i, e in enumerate(entries, 1))
                lines.append(f"{label} STANDINGS: {table}")

    for name, profile in bundle.players.items():
        if profile is None:
            lines.append(f"PLAYER {name}: stats unavailable.")
            continue
        if profile.stats is None:
            lines.append(f"PLAYER {profile.hit.name} ({profile.hit.team}): no season stats.")
            continue
        s = normalize_season_pcts(profile.stats)
        lines.append(
            f"PLAYER {profile.hit.name} ({profile.hit.team}, {profile.hit.position}): "
            f"{s.ppg:.1f} ppg, {s.rpg:.1f} rpg, {s.apg:.1f} apg, {s.spg:.1f} spg, {s.bpg:.1f} bpg, "
            f"FG {s.fg_pct:.1f}%, 3P {s.fg3_pct:.1f}%, FT {s.ft_pct:.1f}%, {s.games_played} GP"
        )

    return "\n".join(lines)


def describe_visual(visual: VisualPayload | None) -> str | None:
    """One line telling the model what the user already sees on screen."""
    if visual is None:
        return None
    if visual.type == "games":
        what = f"a grid of {len(visual.data)} game scores"
    elif visual.type == "game_recap":
        what = "a recap card with the final score, top scorers and team totals"
    elif visual.type == "player":
        what = f"a player card for {visual.data.name} with season averages"
    elif visual.type == "comparison":
        what = f"a side-by-side stat comparison of {visual.data.player1.name} and {visual.data.player2.name}"
    elif visual.type == "standings":
        what = "the conference standings tables"
    elif visual.type == "leaders":
        what = f"a top-{len(visual.data.players)} {visual.data.category} leaderboard"
    else:
        what = f"a team card for {visual.data.team.name}"
    return f"VISUAL NOTE: The user sees {what}. Add analysis, do not restate the numbers shown."


def describe_game_focus(ctx: GameContext) -> str:
    return (
        "SPECIFIC GAME FOCUS:\n"
        f"{ctx.away_team} @ {ctx.home_team}\n"
        f"Score: {ctx.away_score or 0} - {ctx.home_score or 0}\n"
        f"Status: {ctx.status or 'unknown'}"
    )


def compose_prompt(
    request: ChatRequest,
    bundle: DataBundle,
    visual: VisualPayload | None,
    today: date,
) -> ComposedPrompt:
    max_tokens, length_instruction = LENGTHS.get(request.length, LENGTHS["medium"])

    sections = [BASE_PROMPT]
    style = PERSONALITIES.get(request.personality, "")
    if style:
        sections.append(style)
    sections.append(length_instruction)
    sections.append(f"DATE CONTEXT: Today is {today.strftime('%A')}, {today.strftime('%B')} {today.day}, {today.year}.")
    sections.append("CRITICAL ACCURACY RULE: For live or recent games use ONLY the exact numbers in the data below.")

    note = describe_visual(visual)
    if note:
        sections.append(note)

    sections.append(f"===== DATA =====\n{build_live_context(bundle)}\n===== END DATA =====")

    if request.kind == "game" and request.game_context:
        sections.append(describe_game_focus(request.game_context))
    if bundle.notes:
        sections.append("NOTES:\n" + "\n".join(f"- {n}" for n in bundle.notes))

    sections.append(f"USER: {request.message}")
    sections.append("Be concise. No essays.")

    return ComposedPrompt(
        text="\n\n".join(sections),
        max_tokens=max_tokens,
        temperature=TEMPERATURES.get(request.personality, DEFAULT_TEMPERATURE),
    )
