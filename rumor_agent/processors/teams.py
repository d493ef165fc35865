"""Static NBA team alias table used by the team matcher.

Keys are compact lowercase nicknames; values are the surface forms that count
as a mention of the team.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple

TEAM_ALIASES: Mapping[str, Tuple[str, ...]] = MappingProxyType(
    {
        "hawks": ("Atlanta Hawks", "Atlanta", "ATL", "Hawks"),
        "celtics": ("Boston Celtics", "Boston", "BOS", "Celtics"),
        "nets": ("Brooklyn Nets", "Brooklyn", "BKN", "Nets"),
        "hornets": ("Charlotte Hornets", "Charlotte", "CHA", "Hornets"),
        "bulls": ("Chicago Bulls", "Chicago", "CHI", "Bulls"),
        "cavaliers": ("Cleveland Cavaliers", "Cleveland", "CLE", "Cavaliers", "Cavs"),
        "mavericks": ("Dallas Mavericks", "Dallas", "DAL", "Mavericks", "Mavs"),
        "nuggets": ("Denver Nuggets", "Denver", "DEN", "Nuggets"),
        "pistons": ("Detroit Pistons", "Detroit", "DET", "Pistons"),
        "warriors": ("Golden State Warriors", "Golden State", "GSW", "Warriors", "Dubs"),
        "rockets": ("Houston Rockets", "Houston", "HOU", "Rockets"),
        "pacers": ("Indiana Pacers", "Indiana", "IND", "Pacers"),
        "clippers": ("Los Angeles Clippers", "LA Clippers", "LAC", "Clippers"),
        "lakers": ("Los Angeles Lakers", "LA Lakers", "LAL", "Lakers"),
        "grizzlies": ("Memphis Grizzlies", "Memphis", "MEM", "Grizzlies"),
        "heat": ("Miami Heat", "Miami", "MIA", "Heat"),
        "bucks": ("Milwaukee Bucks", "Milwaukee", "MIL", "Bucks"),
        "timberwolves": ("Minnesota Timberwolves", "Minnesota", "MIN", "Timberwolves", "Wolves"),
        "pelicans": ("New Orleans Pelicans", "New Orleans", "NOP", "Pelicans"),
        "knicks": ("New York Knicks", "New York", "NYK", "Knicks"),
        "thunder": ("Oklahoma City Thunder", "Oklahoma City", "OKC", "Thunder"),
        "magic": ("Orlando Magic", "Orlando", "ORL", "Magic"),
        "76ers": ("Philadelphia 76ers", "Philadelphia", "PHI", "76ers", "Sixers"),
        "sixers": ("Philadelphia 76ers", "Philadelphia", "PHI", "76ers", "Sixers"),
        "suns": ("Phoenix Suns", "Phoenix", "PHX", "Suns"),
        "trailblazers": ("Portland Trail Blazers", "Portland", "POR", "Trail Blazers", "Blazers"),
        "blazers": ("Portland Trail Blazers", "Portland", "POR", "Trail Blazers", "Blazers"),
        "kings": ("Sacramento Kings", "Sacramento", "SAC", "Kings"),
        "spurs": ("San Antonio Spurs", "San Antonio", "SAS", "Spurs"),
        "raptors": ("Toronto Raptors", "Toronto", "TOR", "Raptors"),
        "jazz": ("Utah Jazz", "Utah", "UTA", "Jazz"),
        "wizards": ("Washington Wizards", "Washington", "WAS", "Wizards"),
    }
)
