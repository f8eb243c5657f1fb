# ------------------------------------------------------------------------------
# Name:          lypitch.py
# Purpose:       Spell **kern pitches as LilyPond \relative pitches.
#
# Authors:       Greg Chapman <gregc@mac.com>
#
# Copyright:     (c) 2024 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------
import typing as t

from converter21.humdrum import Convert, HumdrumToken

from hum2ly.lilypond import StateVariables

# base-40 pitch class of each natural (0=C .. 6=B), before the +2 offset that
# makes C-double-flat == 0
DIATONIC_TO_BASE40: t.Tuple[int, ...] = (0, 6, 12, 17, 23, 29, 35)
DIATONIC_TO_LETTER: str = 'cdefgab'

ACCIDENTAL_TO_LILYPOND: t.Dict[int, str] = {
    2: 'isis',
    1: 'is',
    0: '',
    -1: 'es',
    -2: 'eses',
}

# \relative c (with no octave marks) is the C below middle C
RELATIVE_REFERENCE_REGISTER: int = 3

# In \relative mode LilyPond picks the octave closest to the previous note, so
# anything more than (roughly) a fourth away needs an octave mark.
OCTAVE_MARK_THRESHOLD: int = 20


def base40FromParts(diatonic: int, accidental: int, octave: int) -> int:
    return (40 * octave) + 2 + DIATONIC_TO_BASE40[diatonic] + accidental


def base40ToRegister(b40: int) -> int:
    # B, B#, F## etc round up to the next C
    register: int = b40 // 40
    if b40 % 40 > 19:
        register += 1
    return register


def registerMarks(count: int) -> str:
    if count > 0:
        return "'" * count
    if count < 0:
        return ',' * -count
    return ''


def octaveMark(pitch: int, previousPitch: t.Optional[int]) -> str:
    '''
        Only one octave of melodic change is handled for now: a leap of more
        than 20 base-40 steps gets a single octave mark.
    '''
    if previousPitch is None or pitch == previousPitch:
        # with no previous pitch there is nothing to be relative to
        return ''

    interval: int = pitch - previousPitch
    if interval > OCTAVE_MARK_THRESHOLD:
        return "'"
    if interval < -OCTAVE_MARK_THRESHOLD:
        return ','
    return ''


def convertPitch(kern: str, state: StateVariables) -> t.Tuple[str, StateVariables]:
    '''
        Returns the LilyPond note name (e.g. "fis'") for a **kern note
        subtoken, and the state updated with this note's pitch.
    '''
    pitch: int = Convert.kernToBase40(kern)
    diatonic: int = Convert.kernToDiatonicPC(kern)
    if diatonic < 0:
        # no pitch (e.g. a recip-only token)
        return '', state
    accidental: int = Convert.kernToAccidentalCount(kern)

    output: str = DIATONIC_TO_LETTER[diatonic]
    output += ACCIDENTAL_TO_LILYPOND.get(accidental, '')
    output += octaveMark(pitch, state.pitch)
    return output, state.withPitch(pitch)


def startingPitchToLilypond(pitch: t.Optional[int]) -> str:
    # ' \relative c' plus enough octave marks to reach the register of pitch
    if pitch is None:
        return ''
    count: int = base40ToRegister(pitch) - RELATIVE_REFERENCE_REGISTER
    return ' \\relative c' + registerMarks(count)


def getSegmentStartingPitch(tokens: t.Iterable[HumdrumToken]) -> t.Optional[int]:
    # the base-40 pitch of the first sounding note
    for token in tokens:
        if not token.isData or token.isNull or token.isRest:
            continue
        pitch: int = Convert.kernToBase40(token.text)
        if pitch >= 0:
            return pitch
    return None
