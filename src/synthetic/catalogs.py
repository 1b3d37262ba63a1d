"""
Catalogs: fixed sampling domains for crew and starship attributes.
"""

from typing import Tuple

from .models import Faction


FIRST_NAMES = (
    "James", "Jean-Luc", "Nyota", "Spock", "Hikaru", "Geordi", "Deanna",
    "William", "Kathryn", "Seven", "Pavel", "Montgomery", "Leonard", "Beverly",
)

SURNAMES = (
    "Kirk", "Picard", "Uhura", "Sulu", "La Forge", "Troi", "Riker",
    "Janeway", "of Nine", "Chekov", "Scott", "McCoy", "Crusher", "Worf",
)

RANKS = (
    "Almirante", "Capitán", "Comandante", "Teniente Comandante",
    "Teniente", "Alférez", "Suboficial", "Cadete",
)

# Inclusive bounds
AGE_RANGE: Tuple[int, int] = (18, 65)

FEDERATION = Faction(
    label="Federacion Unida de Planetas",
    names=(
        "Enterprise", "Voyager", "Defiant", "Discovery", "Reliant",
        "Excalibur", "Constellation", "Yamato", "Phoenix", "Prometheus",
        "Equinox", "Titan", "Aurora", "Odyssey", "Sovereign",
    ),
    prefixes=("NCC", "NX"),
)

ROMULAN = Faction(
    label="Imperio Estelar Romulano",
    names=(
        "Valdore", "Devoras", "Khazara", "Algeron", "Terix",
        "Haakona", "Dividices", "Makar", "D'deridex", "Mogai",
        "Norexan", "Praetus", "Belak", "Keras", "Talvath",
    ),
    prefixes=("IRW",),
)

KLINGON = Faction(
    label="Imperio Klingon",
    names=(
        "Pagh", "Bortas", "Hegh'ta", "Rotarran", "Ch'Tang",
        "Korinar", "Maht-H'a", "K'mpec", "Kronos One", "Negh'Var",
        "Buruk", "Drovana", "Gr'oth", "Klothos", "Somraw",
    ),
    prefixes=("IKS",),
)

# Emission order of the starship roster
DEFAULT_FACTIONS = (FEDERATION, ROMULAN, KLINGON)

DEFAULT_CREW_COUNT = 1000
DEFAULT_SHIPS_PER_FACTION = 30
