"""
Alphabet Table
==============
The single source of truth for the visual form of every letter.

Each consonant maps to one (shape, decoration) pair. Letters sharing a shape
form a family; inside a family the decoration tells them apart. Vowels are
declared letters without a realized form yet, kept in the table as explicit
`None` entries.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Dict, Optional

from gallifreyan.errors import UnimplementedShapeError
from gallifreyan.model.decorations import DecorationKind
from gallifreyan.model.shapes import ShapeKind


class Letter(StrEnum):
    """The letters of the alphabet, digraphs included."""
    E = "E"
    A = "A"
    I = "I"
    O = "O"
    U = "U"
    B = "B"
    CH = "CH"
    D = "D"
    G = "G"
    H = "H"
    F = "F"
    J = "J"
    PH = "PH"
    K = "K"
    L = "L"
    C = "C"
    N = "N"
    P = "P"
    M = "M"
    T = "T"
    WH = "WH"
    SH = "SH"
    R = "R"
    V = "V"
    W = "W"
    S = "S"
    TH = "TH"
    GH = "GH"
    Y = "Y"
    Z = "Z"
    Q = "Q"
    QU = "QU"
    X = "X"
    NG = "NG"

    @property
    def is_vowel(self) -> bool:
        return self in VOWELS


VOWELS = frozenset({Letter.A, Letter.E, Letter.I, Letter.O, Letter.U})


@dataclass(frozen=True)
class LetterForm:
    shape: ShapeKind
    decoration: DecorationKind = DecorationKind.BLANK
    line_angle: float = 0.0  # LINE1 only


def _family(shape: ShapeKind, **members: DecorationKind) -> Dict[Letter, LetterForm]:
    return {Letter[name]: LetterForm(shape, decoration) for name, decoration in members.items()}


ALPHABET: Dict[Letter, Optional[LetterForm]] = {
    # Vowels: no realized shape yet
    Letter.A: None,
    Letter.E: None,
    Letter.I: None,
    Letter.O: None,
    Letter.U: None,
    **_family(
        ShapeKind.CRESCENT,
        B=DecorationKind.BLANK,
        CH=DecorationKind.DOT2,
        D=DecorationKind.DOT3,
        G=DecorationKind.LINE1,
        H=DecorationKind.LINE2,
        F=DecorationKind.LINE3,
    ),
    **_family(
        ShapeKind.FULL,
        J=DecorationKind.BLANK,
        PH=DecorationKind.DOT1,
        K=DecorationKind.DOT2,
        L=DecorationKind.DOT3,
        C=DecorationKind.DOT4,
        N=DecorationKind.LINE1,
        P=DecorationKind.LINE2,
        M=DecorationKind.LINE3,
    ),
    **_family(
        ShapeKind.QUARTER,
        T=DecorationKind.BLANK,
        WH=DecorationKind.DOT1,
        SH=DecorationKind.DOT2,
        R=DecorationKind.DOT3,
        V=DecorationKind.LINE1,
        W=DecorationKind.LINE2,
        S=DecorationKind.LINE3,
    ),
    **_family(
        ShapeKind.NEW,
        TH=DecorationKind.BLANK,
        GH=DecorationKind.DOT1,
        Y=DecorationKind.DOT2,
        Z=DecorationKind.DOT3,
        Q=DecorationKind.DOT4,
        QU=DecorationKind.LINE1,
        X=DecorationKind.LINE2,
        NG=DecorationKind.LINE3,
    ),
}


def form_of(letter: Letter) -> LetterForm:
    """Look up the form of `letter`, failing loudly for letters without one."""
    form = ALPHABET[letter]
    if form is None:
        raise UnimplementedShapeError(f"Letter '{letter}' has no realized shape yet.")
    return form
