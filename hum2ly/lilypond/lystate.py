# ------------------------------------------------------------------------------
# Name:          lystate.py
# Purpose:       StateVariables keeps track of the rolling state needed for
#                LilyPond's \relative pitch entry and duration inheritance.
#
# Authors:       Greg Chapman <gregc@mac.com>
#
# Copyright:     (c) 2024 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------
import typing as t
from fractions import Fraction

class StateVariables(t.NamedTuple):
    '''
        The state of one part, after the most recently rendered token.
        It is never modified; renderers return an updated copy (via _replace).
        None means "nothing seen yet", so the first duration is always printed.
    '''
    duration: t.Optional[Fraction] = None  # duration of last emitted note/rest (quarter notes)
    dots: t.Optional[int] = None           # augmentation dots of last emitted note/rest
    pitch: t.Optional[int] = None          # base-40 pitch of last note (or segment anchor)

    def withDuration(self, duration: Fraction, dots: int) -> 'StateVariables':
        return self._replace(duration=duration, dots=dots)

    def withPitch(self, pitch: t.Optional[int]) -> 'StateVariables':
        return self._replace(pitch=pitch)
