import pytest
from fractions import Fraction

# The things we're testing
from hum2ly.lilypond import TokenRenderer, SegmentResult, StateVariables
from hum2ly.lilypond import LilypondUnsupportedError
from hum2ly.lilypond import getStartToken, segmentTokens
from hum2ly.lilypond.lypitch import getSegmentStartingPitch

# test utilities
from tests.Utilities import *

def allTokens(contents: str) -> list:
    hf = ParseHumdrumString(contents)
    startToken = getStartToken(hf, 1, 0, hf.lineCount)
    return segmentTokens(startToken, hf.lineCount)

def renderAll(contents: str, indent: str = '  ') -> SegmentResult:
    tokens = allTokens(contents)
    state = StateVariables(pitch=getSegmentStartingPitch(tokens))
    return TokenRenderer(indent).renderSegment(tokens, state)

def test_renderSegment():
    result = renderAll('''\
**kern
*clefG2
*k[f#]
*G:
4g
8a(
8b)
=1
4.cc;
8r
.
2dd[
2dd]
*-
''')
    assert result.success
    assert result.diagnostics == []
    CheckString(result.text,
        '  \\clef "treble"\t\t% *clefG2\n'
        + '  \\key g \\major\t\t% *k[f#]\n'
        + '\t\t% *G:\n'
        + '  g4\t\t% 4g\n'
        + '  a8(\t\t% 8a(\n'
        + '  b)\t\t% 8b)\n'
        + '\t\t% =1\n'
        + '  c4.\\fermata\t\t% 4.cc;\n'
        + '  r8\t\t% 8r\n'
        + '  d2~\t\t% 2dd[\n'
        + '  d\t\t% 2dd]\n'
        + '\t\t% *-\n'
    )
    assert result.state == StateVariables(Fraction(2), 0, 208)

def test_renderSegment_octaveMarks():
    result = renderAll('''\
**kern
4c
4g
4C
4B
*-
''')
    assert result.success
    CheckString(result.text,
        '  c4\t\t% 4c\n'
        + "  g'\t\t% 4g\n"
        + '  c,\t\t% 4C\n'
        + "  b'\t\t% 4B\n"
        + '\t\t% *-\n'
    )

def test_renderSegment_indent():
    result = renderAll('''\
**kern
*clefF4
2r
*-
''', indent='\t')
    CheckString(result.text,
        '\t\\clef "bass"\t\t% *clefF4\n'
        + '\tr2\t\t% 2r\n'
        + '\t\t% *-\n'
    )

def test_renderSegment_restsKeepPitch():
    result = renderAll('''\
**kern
4e
4r;
4e
*-
''')
    CheckString(result.text,
        '  e4\t\t% 4e\n'
        + '  r\\fermata\t\t% 4r;\n'
        + '  e\t\t% 4e\n'
        + '\t\t% *-\n'
    )
    assert result.state.pitch == 174

def test_renderSegment_tieContinuation():
    result = renderAll('''\
**kern
2c[
2c_
2c]
*-
''')
    CheckString(result.text,
        '  c2~\t\t% 2c[\n'
        + '  c~\t\t% 2c_\n'
        + '  c\t\t% 2c]\n'
        + '\t\t% *-\n'
    )

def test_renderSegment_unknownClef():
    result = renderAll('''\
**kern
*clefG3
4c
*-
''')
    assert result.success
    CheckString(result.text,
        '\t\t% *clefG3\n'
        + '  c4\t\t% 4c\n'
        + '\t\t% *-\n'
    )
    assert DiagnosticKinds(result.diagnostics) == [DiagnosticKind.UnknownClef]

def test_renderSegment_unrenderableDuration():
    result = renderAll('''\
**kern
4c
0d
4e
*-
''')
    assert result.success
    assert result.diagnostics == []
    CheckString(result.text,
        '  c4\t\t% 4c\n'
        + '  d\t\t% 0d\n'
        + '  e\t\t% 4e\n'
        + '\t\t% *-\n'
    )

def test_renderSegment_chord():
    result = renderAll('''\
**kern
4c
4e 4g
4a
*-
''')
    assert not result.success
    CheckString(result.text, '  c4\t\t% 4c\n')
    assert result.diagnostics == [
        Diagnostic(
            DiagnosticKind.UnsupportedConstruct,
            'Cannot convert chords yet: 4e 4g',
            3, 1
        )
    ]
    # the state after the last note that was converted
    assert result.state.pitch == 162

def test_convertDataToken_chordRaises():
    tokens = allTokens('''\
**kern
4e 4g
*-
''')
    renderer = TokenRenderer()
    with pytest.raises(LilypondUnsupportedError) as excInfo:
        renderer.convertDataToken(tokens[0], StateVariables())
    assert excInfo.value.token is tokens[0]

def test_convertArticulations():
    CheckString(TokenRenderer.convertArticulations('4c;'), '\\fermata')
    CheckString(TokenRenderer.convertArticulations('4c'), '')

def test_sourceComment():
    tokens = allTokens('''\
**kern
!a local comment
4c
*-
''')
    CheckString(TokenRenderer.sourceComment(tokens[0]), '\t\t% !a local comment\n')
    text, state, diagnostics = TokenRenderer().renderToken(tokens[0], StateVariables())
    CheckString(text, '\t\t% !a local comment\n')
    assert state == StateVariables()
    assert diagnostics == []
