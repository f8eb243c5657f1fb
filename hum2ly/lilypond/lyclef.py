# ------------------------------------------------------------------------------
# Name:          lyclef.py
# Purpose:       Convert **kern clefs to LilyPond \clef commands.
#
# Authors:       Greg Chapman <gregc@mac.com>
#
# Copyright:     (c) 2024 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------
import typing as t

from converter21.humdrum import HumdrumToken

from hum2ly.lilypond import DiagnosticKind, Diagnostic

# http://lilypond.org/doc/v2.19/Documentation/notation/clef-styles
HUMDRUM_CLEF_TO_LILYPOND: t.Dict[str, str] = {
    '*clefG2': 'treble',
    '*clefF4': 'bass',
    '*clefC3': 'alto',
    '*clefGv2': 'treble_8',
    '*clefC4': 'tenor',
    '*clefX': 'percussion',
    '*clefC2': 'mezzosoprano',
    '*clefC5': 'baritone',
    '*clefG1': 'french',
    '*clefC1': 'soprano',
    '*clefF3': 'varbaritone',
}


def convertClef(token: HumdrumToken) -> t.Tuple[str, t.List[Diagnostic]]:
    lyClef: t.Optional[str] = HUMDRUM_CLEF_TO_LILYPOND.get(token.text)
    if lyClef is None:
        return '', [Diagnostic.fromToken(
            DiagnosticKind.UnknownClef,
            'unknown clef: ' + token.text,
            token
        )]
    return f'\\clef "{lyClef}"', []
