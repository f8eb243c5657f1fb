import pytest

# The things we're testing
from hum2ly.lilypond import DiagnosticKind, Diagnostic, diagnosticsToPreamble
from hum2ly.lilypond import LilypondExportError, LilypondUnsupportedError

# test utilities
from tests.Utilities import *

def test_Diagnostic_textLines():
    diag = Diagnostic(DiagnosticKind.UnknownClef, 'unknown clef: *clefG3', 4, 2)
    assert diag.textLines == ['Error: unknown clef: *clefG3', '\tLine:  4', '\tField: 2']

    diag = Diagnostic(DiagnosticKind.UnsupportedConstruct, 'oops')
    assert diag.textLines == ['Error: oops']

def test_Diagnostic_fromToken():
    hf = ParseHumdrumString('''\
**kern\t**kern
*clefF4\t*clefG2
4C\t4c
*-\t*-
''')
    token = TokenWithText(hf, '*clefG2')
    diag = Diagnostic.fromToken(DiagnosticKind.UnknownClef, 'msg', token)
    assert diag.lineNumber == 2
    assert diag.fieldNumber == 2
    assert diag == Diagnostic(DiagnosticKind.UnknownClef, 'msg', 2, 2)
    assert diag != Diagnostic(DiagnosticKind.UnknownKeySignature, 'msg', 2, 2)

    diag = Diagnostic.fromToken(DiagnosticKind.UnsupportedConstruct, 'msg', None)
    CheckIsNone(diag.lineNumber)
    CheckIsNone(diag.fieldNumber)

def test_diagnosticsToPreamble():
    CheckString(diagnosticsToPreamble([]), '')
    CheckString(
        diagnosticsToPreamble([
            Diagnostic(DiagnosticKind.NonStandardKeySignature, 'non-standard key signature: *k[c#]', 3, 1),
            Diagnostic(DiagnosticKind.UnsupportedConstruct, 'bad'),
        ]),
        '% Error: non-standard key signature: *k[c#]\n'
        + '% \tLine:  3\n'
        + '% \tField: 1\n'
        + '% Error: bad\n'
        + '\n'
    )

def test_exceptions():
    err = LilypondUnsupportedError('Cannot convert chords yet: 4c 4e')
    assert isinstance(err, LilypondExportError)
    CheckIsNone(err.token)
    CheckString(str(err), 'Cannot convert chords yet: 4c 4e')
