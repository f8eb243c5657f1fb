# ------------------------------------------------------------------------------
# Name:          lydiagnostics.py
# Purpose:       Recoverable (and not so recoverable) problems found while
#                converting Humdrum to LilyPond.  They are collected by the
#                converter and printed as comments at the top of the output.
#
# Authors:       Greg Chapman <gregc@mac.com>
#
# Copyright:     (c) 2024 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------
import typing as t
from enum import IntEnum, unique, auto

from converter21.humdrum import HumdrumToken

@unique
class DiagnosticKind(IntEnum):
    NonStandardKeySignature = 1
    UnknownKeySignature = auto()
    UnknownClef = auto()
    UnsupportedConstruct = auto()


class Diagnostic:
    '''
        A message, with the (1-based) line and field numbers of the token
        that caused it, if there was one.
    '''
    def __init__(
        self,
        kind: DiagnosticKind,
        message: str,
        lineNumber: t.Optional[int] = None,
        fieldNumber: t.Optional[int] = None
    ) -> None:
        self.kind: DiagnosticKind = kind
        self.message: str = message
        self.lineNumber: t.Optional[int] = lineNumber
        self.fieldNumber: t.Optional[int] = fieldNumber

    @classmethod
    def fromToken(
        cls,
        kind: DiagnosticKind,
        message: str,
        token: t.Optional[HumdrumToken]
    ) -> 'Diagnostic':
        if token is None:
            return cls(kind, message)
        return cls(kind, message, token.lineNumber, token.fieldNumber)

    def __repr__(self) -> str:
        return (f'Diagnostic({self.kind.name}, {self.message!r}, '
                f'line={self.lineNumber}, field={self.fieldNumber})')

    def __eq__(self, other) -> bool:
        if not isinstance(other, Diagnostic):
            return NotImplemented
        return (self.kind == other.kind
                and self.message == other.message
                and self.lineNumber == other.lineNumber
                and self.fieldNumber == other.fieldNumber)

    @property
    def textLines(self) -> t.List[str]:
        output: t.List[str] = ['Error: ' + self.message]
        if self.lineNumber is not None:
            output.append(f'\tLine:  {self.lineNumber}')
        if self.fieldNumber is not None:
            output.append(f'\tField: {self.fieldNumber}')
        return output


def diagnosticsToPreamble(diagnostics: t.Sequence[Diagnostic]) -> str:
    # one LilyPond comment per line, and a blank line after them all
    if not diagnostics:
        return ''

    output: str = ''
    for diagnostic in diagnostics:
        for line in diagnostic.textLines:
            output += '% ' + line + '\n'
    return output + '\n'
