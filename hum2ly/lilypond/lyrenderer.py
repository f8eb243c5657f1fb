# ------------------------------------------------------------------------------
# Name:          lyrenderer.py
# Purpose:       TokenRenderer renders the **kern tokens of one segment of one
#                part as the body of a LilyPond music expression.
#
# Authors:       Greg Chapman <gregc@mac.com>
#
# Copyright:     (c) 2024 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------
import typing as t

from music21 import environment

from converter21.humdrum import HumdrumToken

from hum2ly.lilypond import LilypondUnsupportedError
from hum2ly.lilypond import DiagnosticKind, Diagnostic
from hum2ly.lilypond import StateVariables
from hum2ly.lilypond.lyduration import convertDuration
from hum2ly.lilypond.lypitch import convertPitch
from hum2ly.lilypond.lyclef import convertClef
from hum2ly.lilypond.lykeysignature import convertKeySignature

environLocal = environment.Environment('hum2ly.lilypond.lyrenderer')

# **kern signifier -> LilyPond articulation
ARTICULATIONS: t.Tuple[t.Tuple[str, str], ...] = (
    (';', '\\fermata'),
)


class SegmentResult(t.NamedTuple):
    text: str
    state: StateVariables
    diagnostics: t.List[Diagnostic]
    success: bool


class TokenRenderer:
    def __init__(self, indent: str = '  ') -> None:
        self.indent: str = indent

    @staticmethod
    def sourceComment(token: HumdrumToken) -> str:
        # echo the Humdrum token, so the LilyPond output can be traced back to it
        return '\t\t% ' + token.text + '\n'

    def renderSegment(self, tokens: t.Sequence[HumdrumToken], state: StateVariables) -> SegmentResult:
        '''
            Renders the tokens in order, threading state through.  Stops at the
            first token that can't be converted at all (a chord), returning
            success=False along with everything rendered before it.
        '''
        output: str = ''
        diagnostics: t.List[Diagnostic] = []

        for token in tokens:
            try:
                text, state, tokenDiagnostics = self.renderToken(token, state)
            except LilypondUnsupportedError as e:
                environLocal.warn(f'{e} (line {token.lineNumber})')
                diagnostics.append(
                    Diagnostic.fromToken(DiagnosticKind.UnsupportedConstruct, str(e), e.token)
                )
                return SegmentResult(output, state, diagnostics, False)

            output += text
            diagnostics.extend(tokenDiagnostics)

        return SegmentResult(output, state, diagnostics, True)

    def renderToken(
        self,
        token: HumdrumToken,
        state: StateVariables
    ) -> t.Tuple[str, StateVariables, t.List[Diagnostic]]:
        if token.isNull:
            # do nothing for now, later check for dynamics, lyrics, etc.
            return '', state, []

        if token.isData:
            text, state = self.convertDataToken(token, state)
            return text + self.sourceComment(token), state, []

        if token.isInterpretation:
            text, diagnostics = self.convertInterpretationToken(token)
            return text + self.sourceComment(token), state, diagnostics

        # barlines and local comments
        return self.sourceComment(token), state, []

    def convertDataToken(self, token: HumdrumToken, state: StateVariables) -> t.Tuple[str, StateVariables]:
        if token.isRest:
            return self.convertRest(token, state)
        if token.isChord:
            raise LilypondUnsupportedError('Cannot convert chords yet: ' + token.text, token)
        return self.convertNote(token, state)

    def convertRest(self, token: HumdrumToken, state: StateVariables) -> t.Tuple[str, StateVariables]:
        # Rests should not be in chords, so filter out any chordness.
        stok: str = token.subtokens[0]

        output: str = self.indent + 'r'
        duration, state = convertDuration(stok, state)
        output += duration
        output += self.convertArticulations(token.text)
        return output, state

    def convertNote(self, token: HumdrumToken, state: StateVariables) -> t.Tuple[str, StateVariables]:
        stok: str = token.subtokens[0]

        pitch, state = convertPitch(stok, state)
        duration, state = convertDuration(stok, state)
        output: str = self.indent + pitch + duration

        # ties
        if '[' in stok or '_' in stok:
            output += '~'

        # slurs (end the previous one before starting the next)
        if ')' in stok:
            output += ')'
        if '(' in stok:
            output += '('

        output += self.convertArticulations(stok)
        return output, state

    @staticmethod
    def convertArticulations(stok: str) -> str:
        output: str = ''
        for signifier, lyArticulation in ARTICULATIONS:
            if signifier in stok:
                output += lyArticulation
        return output

    def convertInterpretationToken(self, token: HumdrumToken) -> t.Tuple[str, t.List[Diagnostic]]:
        text: str = ''
        diagnostics: t.List[Diagnostic] = []
        if token.isClef:
            text, diagnostics = convertClef(token)
        elif token.isKeySignature:
            text, diagnostics = convertKeySignature(token)

        if text:
            text = self.indent + text
        return text, diagnostics
