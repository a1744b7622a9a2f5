"""Player alias dictionary: nickname / misspelling -> canonical ESPN display name.

Iteration order matters. Substring and fuzzy lookups return the first key
that qualifies, so full names are listed before short nicknames.
"""

PLAYER_ALIASES: dict[str, str] = {
    # LeBron James
    "lebron james": "LeBron James",
    "lebron": "LeBron James",
    "king james": "LeBron James",
    "lbj": "LeBron James",
    # Stephen Curry
    "stephen curry": "Stephen Curry",
    "steph curry": "Stephen Curry",
    "steph": "Stephen Curry",
    "curry": "Stephen Curry",
    "chef curry": "Stephen Curry",
    # Kevin Durant
    "kevin durant": "Kevin Durant",
    "durant": "Kevin Durant",
    "kd": "Kevin Durant",
    # Giannis Antetokounmpo
    "giannis antetokounmpo": "Giannis Antetokounmpo",
    "giannis": "Giannis Antetokounmpo",
    "greek freak": "Giannis Antetokounmpo",
    "antetokounmpo": "Giannis Antetokounmpo",
    "yannis": "Giannis Antetokounmpo",
    # Luka Dončić
    "luka doncic": "Luka Dončić",
    "luka": "Luka Dončić",
    "doncic": "Luka Dončić",
    "donchich": "Luka Dončić",
    # Nikola Jokić
    "nikola jokic": "Nikola Jokić",
    "jokic": "Nikola Jokić",
    "jokich": "Nikola Jokić",
    "the joker": "Nikola Jokić",
    # Jayson Tatum
    "jayson tatum": "Jayson Tatum",
    "jason tatum": "Jayson Tatum",
    "tatum": "Jayson Tatum",
    # Joel Embiid
    "joel embiid": "Joel Embiid",
    "embiid": "Joel Embiid",
    "embid": "Joel Embiid",
    # Anthony Edwards
    "anthony edwards": "Anthony Edwards",
    "ant edwards": "Anthony Edwards",
    "ant man": "Anthony Edwards",
    # Shai Gilgeous-Alexander
    "shai gilgeous-alexander": "Shai Gilgeous-Alexander",
    "shai gilgeous alexander": "Shai Gilgeous-Alexander",
    "gilgeous-alexander": "Shai Gilgeous-Alexander",
    "shai": "Shai Gilgeous-Alexander",
    "sga": "Shai Gilgeous-Alexander",
    # Devin Booker
    "devin booker": "Devin Booker",
    "booker": "Devin Booker",
    # Ja Morant
    "ja morant": "Ja Morant",
    "morant": "Ja Morant",
    # Donovan Mitchell
    "donovan mitchell": "Donovan Mitchell",
    "spida": "Donovan Mitchell",
    # Jalen Brunson
    "jalen brunson": "Jalen Brunson",
    "brunson": "Jalen Brunson",
    # De'Aaron Fox
    "de'aaron fox": "De'Aaron Fox",
    "deaaron fox": "De'Aaron Fox",
    # Kawhi Leonard
    "kawhi leonard": "Kawhi Leonard",
    "kawhi": "Kawhi Leonard",
    # Paul George
    "paul george": "Paul George",
    # James Harden
    "james harden": "James Harden",
    "harden": "James Harden",
    # Damian Lillard
    "damian lillard": "Damian Lillard",
    "lillard": "Damian Lillard",
    "dame": "Damian Lillard",
    # Bam Adebayo
    "bam adebayo": "Bam Adebayo",
    "adebayo": "Bam Adebayo",
    "bam": "Bam Adebayo",
    # Jimmy Butler
    "jimmy butler": "Jimmy Butler",
    "jimmy buckets": "Jimmy Butler",
    # Victor Wembanyama
    "victor wembanyama": "Victor Wembanyama",
    "wembanyama": "Victor Wembanyama",
    "wembenyama": "Victor Wembanyama",
    "wemby": "Victor Wembanyama",
    # Kyrie Irving
    "kyrie irving": "Kyrie Irving",
    "kyrie": "Kyrie Irving",
    # Tyrese Haliburton
    "tyrese haliburton": "Tyrese Haliburton",
    "haliburton": "Tyrese Haliburton",
    # Trae Young
    "trae young": "Trae Young",
    "ice trae": "Trae Young",
    # Zion Williamson
    "zion williamson": "Zion Williamson",
    "zion": "Zion Williamson",
    # Paolo Banchero
    "paolo banchero": "Paolo Banchero",
    "banchero": "Paolo Banchero",
    # Cade Cunningham
    "cade cunningham": "Cade Cunningham",
    "cunningham": "Cade Cunningham",
    # Jaylen Brown
    "jaylen brown": "Jaylen Brown",
    # Domantas Sabonis
    "domantas sabonis": "Domantas Sabonis",
    "sabonis": "Domantas Sabonis",
    # Karl-Anthony Towns
    "karl-anthony towns": "Karl-Anthony Towns",
    "karl anthony towns": "Karl-Anthony Towns",
    "kat": "Karl-Anthony Towns",
    # Anthony Davis
    "anthony davis": "Anthony Davis",
    "the brow": "Anthony Davis",
    # Chet Holmgren
    "chet holmgren": "Chet Holmgren",
    "holmgren": "Chet Holmgren",
}
