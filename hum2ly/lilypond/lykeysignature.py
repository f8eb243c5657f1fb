# ------------------------------------------------------------------------------
# Name:          lykeysignature.py
# Purpose:       Convert **kern key signatures (and key designations) to
#                LilyPond \key commands.
#
# Authors:       Greg Chapman <gregc@mac.com>
#
# Copyright:     (c) 2024 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------
import typing as t

from converter21.humdrum import HumdrumToken

from hum2ly.lilypond import DiagnosticKind, Diagnostic

SHARP_ORDER: t.Tuple[str, ...] = ('f#', 'c#', 'g#', 'd#', 'a#', 'e#', 'b#')
FLAT_ORDER: t.Tuple[str, ...] = ('b-', 'e-', 'a-', 'd-', 'g-', 'c-', 'f-')

# the circle of fifths, from 7 flats (in lydian) to 7 sharps (in locrian)
CIRCLE_OF_FIFTHS: t.Tuple[str, ...] = (
    'fes', 'ces', 'ges', 'des', 'aes', 'ees', 'bes',
    'f', 'c', 'g', 'd', 'a', 'e', 'b',
    'fis', 'cis', 'gis', 'dis', 'ais', 'eis', 'bis'
)

# where each mode's tonic (with no sharps or flats) is in CIRCLE_OF_FIFTHS
MODE_TONIC_OFFSETS: t.Dict[str, int] = {
    'lydian': 7,       # f
    'major': 8,        # c
    'ionian': 8,
    'mixolydian': 9,   # g
    'dorian': 10,      # d
    'minor': 11,       # a
    'aeolian': 11,
    'phrygian': 12,    # e
    'locrian': 13,     # b
}

# (mode, accidentalCount) -> tonic, e.g. ('dorian', -1) -> 'g'
KEY_TONICS: t.Dict[t.Tuple[str, int], str] = {
    (mode, accidCount): CIRCLE_OF_FIFTHS[offset + accidCount]
    for mode, offset in MODE_TONIC_OFFSETS.items()
    for accidCount in range(-7, 8)
}

# First match wins
MODE_ABBREVIATIONS: t.Tuple[t.Tuple[str, str], ...] = (
    ('dor', 'dorian'),
    ('phr', 'phrygian'),
    ('lyd', 'lydian'),
    ('mix', 'mixolydian'),
    ('aeo', 'aeolian'),
    ('loc', 'locrian'),
    ('ion', 'ionian'),
)


def _prefixLength(flags: t.Sequence[bool]) -> t.Optional[int]:
    # number of leading Trues, or None if a True follows a False
    count: int = 0
    while count < len(flags) and flags[count]:
        count += 1
    if any(flags[count:]):
        return None
    return count


def keySignatureToAccidentalCount(keySig: str) -> t.Optional[int]:
    '''
        Returns the number of sharps (positive) or flats (negative) in a **kern
        key signature (e.g. '*k[f#c#]' -> 2, '*k[b-]' -> -1, '*k[]' -> 0), or
        None if it is not one of the fifteen standard key signatures.
    '''
    sharps: t.List[bool] = [accid in keySig for accid in SHARP_ORDER]
    flats: t.List[bool] = [accid in keySig for accid in FLAT_ORDER]

    if any(sharps) and any(flats):
        return None

    if any(flats):
        numFlats: t.Optional[int] = _prefixLength(flats)
        if numFlats is None:
            return None
        return -numFlats

    return _prefixLength(sharps)


def getKeyDesignation(token: t.Optional[HumdrumToken]) -> t.Optional[HumdrumToken]:
    '''
        Look for a key designation (e.g. '*E-:', '*d:dor') at the same timestamp
        as the key signature token: first after it in the spine, then before.
        Data tokens stop the search.
    '''
    if token is None:
        return None

    timestamp = token.durationFromStart

    ttok = token.nextToken0
    while ttok is not None and ttok.durationFromStart == timestamp:
        if ttok.isData:
            break
        if ttok.isKeyDesignation:
            return ttok
        ttok = ttok.nextToken0

    ttok = token.previousToken0
    while ttok is not None and ttok.durationFromStart == timestamp:
        if ttok.isData:
            break
        if ttok.isKeyDesignation:
            return ttok
        ttok = ttok.previousToken0

    return None


def keyDesignationToTonicAndMode(designation: str) -> t.Tuple[str, str]:
    '''
        '*E-:' -> ('ees', 'major'), '*c#:' -> ('cis', 'minor'),
        '*d:dor' -> ('d', 'dorian')
    '''
    text: str = designation[1:]  # skip the '*'
    tonicText, _, modeText = text.partition(':')

    tonic: str = ''
    for ch in tonicText:
        if ch == '#':
            tonic += 'is'
        elif ch == '-':
            tonic += 'es'
        else:
            tonic += ch.lower()

    mode: str = 'major'
    if tonicText[:1].islower():
        mode = 'minor'
    for abbrev, modeName in MODE_ABBREVIATIONS:
        if abbrev in modeText:
            mode = modeName
            break

    return tonic, mode


def convertKeySignature(token: HumdrumToken) -> t.Tuple[str, t.List[Diagnostic]]:
    '''
        Returns the LilyPond \\key command for a **kern key signature token,
        or '' (and a diagnostic explaining why) if it can't be converted.
    '''
    accidCount: t.Optional[int] = keySignatureToAccidentalCount(token.text)
    if accidCount is None:
        return '', [Diagnostic.fromToken(
            DiagnosticKind.NonStandardKeySignature,
            'non-standard key signature: ' + token.text,
            token
        )]

    designation = getKeyDesignation(token)
    if designation is None:
        # presume major key if no key designation
        mode: str = 'major'
        tonic: str = KEY_TONICS[(mode, accidCount)]
    else:
        tonic, mode = keyDesignationToTonicAndMode(designation.text)

    if KEY_TONICS.get((mode, accidCount)) == tonic:
        return f'\\key {tonic} \\{mode}', []

    message: str = 'Unknown key signature ' + token.text
    if designation is not None:
        message += ' in combination with the key ' + designation.text
    return '', [Diagnostic.fromToken(DiagnosticKind.UnknownKeySignature, message, token)]
