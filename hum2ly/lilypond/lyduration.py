# ------------------------------------------------------------------------------
# Name:          lyduration.py
# Purpose:       Convert **kern rhythms (recip) to LilyPond durations.
#
# Authors:       Greg Chapman <gregc@mac.com>
#
# Copyright:     (c) 2024 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------
import typing as t
from fractions import Fraction

from music21 import environment

from converter21.humdrum import Convert

from hum2ly.lilypond import StateVariables

environLocal = environment.Environment('hum2ly.lilypond.lyduration')


def recipDotCount(recip: str) -> int:
    return recip.count('.')


def recipToFraction(recip: str) -> Fraction:
    # Convert returns an opFrac (float when exactly representable), and we want
    # exact numerators and denominators.
    return Fraction(Convert.recipToDuration(recip))


def durationToLilypond(durationNoDots: Fraction, dots: int) -> t.Optional[str]:
    '''
        Returns the LilyPond duration string (e.g. '4', '8.', '2..') for a
        duration in quarter notes, or None if 4/duration isn't an integer (breves
        and longer, grace notes with no duration, etc).  Simple tuplets come
        out as their nominal duration (e.g. '12' for a triplet eighth).

        >>> durationToLilypond(Fraction(1, 2), 1)
        '8.'
    '''
    if durationNoDots <= 0:
        return None

    lyDur: Fraction = Fraction(durationNoDots.denominator, durationNoDots.numerator) * 4
    if lyDur.denominator != 1:
        return None

    return str(lyDur.numerator) + '.' * dots


def convertDuration(recip: str, state: StateVariables) -> t.Tuple[str, StateVariables]:
    '''
        Returns the LilyPond duration to print after a note or rest, and the
        updated state.  Returns '' if the duration is the same as that of the
        previously printed note/rest (LilyPond will carry it over), and also
        if the duration can't be expressed (yet).
    '''
    duration: Fraction = recipToFraction(recip)
    dots: int = recipDotCount(recip)
    if dots == state.dots and duration == state.duration:
        return '', state

    durationNoDots = Fraction(Convert.recipToDurationNoDots(recip))
    output: t.Optional[str] = durationToLilypond(durationNoDots, dots)
    if output is None:
        environLocal.printDebug(f'cannot express duration of {recip!r} in LilyPond, skipping it')
        return '', state

    return output, state.withDuration(duration, dots)
