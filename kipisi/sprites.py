"""The sitelen pona sprite sheet: glyph names and their cells on the sheet."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

SPRITE_SIZE = 8
"""Width and height of one glyph cell, in pixels."""

SHEET_COLUMNS = 16
"""Number of glyph cells in one row of the sheet."""

_NAME_PREFIX = "SITELEN_"


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle in pixels."""

    x: int
    y: int
    width: int
    height: int


class Sitelen(Enum):
    """Every glyph on the sheet, in row-major order of its cells."""

    A = 0
    AKESI = 1
    ALA = 2
    ALASA = 3
    ALE = 4
    ANPA = 5
    ANTE = 6
    ANU = 7
    AWEN = 8
    E = 9
    EN = 10
    ESUN = 11
    IJO = 12
    IKE = 13
    ILO = 14
    INSA = 15

    JAKI = 16
    JAN = 17
    JELO = 18
    JO = 19
    KALA = 20
    KALAMA = 21
    KAMA = 22
    KASI = 23
    KEN = 24
    KEPEKEN = 25
    KILI = 26
    KIWEN = 27
    KO = 28
    KON = 29
    KULE = 30
    KULUPU = 31

    KUTE = 32
    LA = 33
    LAPE = 34
    LASO = 35
    LAWA = 36
    LEN = 37
    LETE = 38
    LI = 39
    LILI = 40
    LINJA = 41
    LIPU = 42
    LOJE = 43
    LON = 44
    LUKA = 45
    LUKIN = 46
    LUPA = 47

    MA = 48
    MAMA = 49
    MANI = 50
    MELI = 51
    MI = 52
    MIJE = 53
    MOKU = 54
    MOLI = 55
    MONSI = 56
    MU = 57
    MUN = 58
    MUSI = 59
    MUTE = 60
    NANPA = 61
    NASA = 62
    NASIN = 63

    NENA = 64
    NI = 65
    NIMI = 66
    NOKA = 67
    O = 68
    OLIN = 69
    ONA = 70
    OPEN = 71
    PAKALA = 72
    PALI = 73
    PALISA = 74
    PAN = 75
    PANA = 76
    PI = 77
    PILIN = 78
    PIMEJA = 79

    PINI = 80
    PIPI = 81
    POKA = 82
    POKI = 83
    PONA = 84
    PU = 85
    SAMA = 86
    SELI = 87
    SELO = 88
    SEME = 89
    SEWI = 90
    SIJELO = 91
    SIKE = 92
    SIN = 93
    SINA = 94
    SINPIN = 95

    SITELEN = 96
    SONA = 97
    SOWELI = 98
    SULI = 99
    SUNO = 100
    SUPA = 101
    SUWI = 102
    TAN = 103
    TASO = 104
    TAWA = 105
    TELO = 106
    TENPO = 107
    TOKI = 108
    TOMO = 109
    TU = 110
    UNPA = 111

    UTA = 112
    UTALA = 113
    WALO = 114
    WAN = 115
    WASO = 116
    WAWA = 117
    WEKA = 118
    WILE = 119
    EPIKU = 120
    JASIMA = 121
    KIJETESANTAKALU = 122
    KIN = 123
    KIPISI = 124
    KOKOSILA = 125
    KU = 126
    LANPAN = 127

    LEKO = 128
    MESO = 129
    MISIKEKE = 130
    MONSUTA = 131
    N = 132
    NAMAKO = 133
    OKO = 134
    TONSI = 135

    def rect(self) -> Rect:
        """The glyph's cell on the sprite sheet."""
        row, column = divmod(self.value, SHEET_COLUMNS)
        return Rect(column * SPRITE_SIZE, row * SPRITE_SIZE, SPRITE_SIZE, SPRITE_SIZE)


def sprite_rect(name: str) -> Rect:
    """Look up a glyph's cell by word, e.g. ``"soweli"`` or ``"SITELEN_SOWELI"``.

    Raises KeyError for a word that has no glyph on the sheet.
    """
    key = name.strip().upper()
    if key.startswith(_NAME_PREFIX) and key != _NAME_PREFIX.rstrip("_"):
        key = key[len(_NAME_PREFIX):]
    try:
        return Sitelen[key].rect()
    except KeyError:
        raise KeyError(f"no glyph named {name!r}") from None