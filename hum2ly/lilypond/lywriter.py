# ------------------------------------------------------------------------------
# Name:          lywriter.py
# Purpose:       HumdrumToLilypondConverter is an object that takes a
#                HumdrumFile and writes it to a file as LilyPond data.
#
# Authors:       Greg Chapman <gregc@mac.com>
#
# Copyright:     (c) 2024 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------
import typing as t
from pathlib import Path

from music21 import environment

from converter21.humdrum import HumdrumFile, HumdrumToken

from hum2ly.lilypond import Diagnostic, diagnosticsToPreamble
from hum2ly.lilypond import StateVariables
from hum2ly.lilypond import Segment, extractSegments, getStartToken, segmentTokens
from hum2ly.lilypond import TokenRenderer
from hum2ly.lilypond.lypitch import getSegmentStartingPitch, startingPitchToLilypond

environLocal = environment.Environment('hum2ly.lilypond.lywriter')

DEFAULT_LILYPOND_VERSION: str = '2.18.2'

ROMAN_NUMERALS: t.Tuple[t.Tuple[int, str], ...] = (
    (1000, 'M'), (900, 'CM'), (500, 'D'), (400, 'CD'),
    (100, 'C'), (90, 'XC'), (50, 'L'), (40, 'XL'),
    (10, 'X'), (9, 'IX'), (5, 'V'), (4, 'IV'), (1, 'I')
)


def arabicToRomanNumeral(arabic: int, upperCase: bool = True) -> str:
    # LilyPond identifiers can't contain digits, so parts are partI, partII...
    output: str = ''
    for value, numeral in ROMAN_NUMERALS:
        while arabic >= value:
            output += numeral
            arabic -= value
    if not upperCase:
        return output.lower()
    return output


def commentLineToLilypond(text: str) -> str:
    # '!!!COM: Bach' -> '%%%COM: Bach'
    stripped: str = text.lstrip('!')
    return '%' * (len(text) - len(stripped)) + stripped


class HumdrumToLilypondConverter:
    '''
        Converts the **kern spines of a HumdrumFile into a LilyPond score, with
        one staff per spine, and one \\relative music expression per section
        label (*>A, etc).
    '''
    def __init__(self) -> None:
        # default options (these can be set to non-default values by clients,
        # as long as they do it before they call convert())
        self.lilypondVersion: str = DEFAULT_LILYPOND_VERSION
        self.indent: str = '  '

        # the problems found during the most recent conversion
        self.diagnostics: t.List[Diagnostic] = []

    def convertString(self, fp, contents: str) -> bool:
        hf = HumdrumFile()
        if contents:
            hf.readString(contents)
        return self.convert(fp, hf)

    def convertFile(self, fp, fileName: t.Union[str, Path]) -> bool:
        hf = HumdrumFile()
        try:
            hf.read(fileName)
        except OSError as e:
            environLocal.warn(f'cannot read {fileName}: {e}')
            self.diagnostics = []
            return False
        return self.convert(fp, hf)

    def convert(self, fp, humdrumFile: HumdrumFile) -> bool:
        '''
            Writes the LilyPond version of humdrumFile to fp.  Returns False if
            some part could not be converted (in which case that part, and any
            parts after it, are left out of the output).
        '''
        self.diagnostics = []

        if humdrumFile.parseError:
            environLocal.warn(f'Humdrum parse error: {humdrumFile.parseError}')

        # Reverse the order, since top part is last spine.
        kernStarts = list(reversed(humdrumFile.kernSpineStartList()))
        if not kernStarts:
            # no parts in file, give up.
            environLocal.warn('no **kern spines found, nothing to convert')
            return True

        status: bool = True
        musicOut: str = ''
        staffOut: str = ''
        scoreOut: str = ''
        for i, kernStart in enumerate(kernStarts):
            partName: str = 'part' + arabicToRomanNumeral(i + 1)
            success, musicText, segmentNames = self.convertPart(
                humdrumFile, kernStart.track, partName
            )
            if not success:
                environLocal.warn(f'conversion of {partName} failed; it will be omitted')
                status = False
                break

            musicOut += musicText
            staffOut += partName + ' = \\new Staff {\n' + self.indent
            staffOut += ''.join('\\' + name + ' ' for name in segmentNames)
            staffOut += '\n}\n\n'
            scoreOut += self.indent + '{ \\' + partName + ' }\n'

        output: str = self.headerComments(humdrumFile)
        output += diagnosticsToPreamble(self.diagnostics)
        output += f'\\version "{self.lilypondVersion}"\n\n'
        output += self.headerBlock()
        output += musicOut
        output += staffOut
        output += '\\score {\n'
        output += self.indent + '<<\n'
        output += scoreOut
        output += self.indent + '>>\n'
        output += '}\n'
        output += self.footerComments(humdrumFile)

        fp.write(output)
        return status

    def headerBlock(self) -> str:
        return '\\header {\n' + self.indent + 'tagline = ""\n}\n\n'

    def convertPart(
        self,
        humdrumFile: HumdrumFile,
        track: int,
        partName: str
    ) -> t.Tuple[bool, str, t.List[str]]:
        '''
            Returns success, the LilyPond assignments for each of the part's
            segments, and the names assigned.
        '''
        segments: t.List[Segment] = extractSegments(humdrumFile, track)
        state = StateVariables()
        renderer = TokenRenderer(self.indent)

        output: str = ''
        segmentNames: t.List[str] = []
        for segment in segments:
            if segment.label is None:
                segmentName: str = partName + 'Music'
            else:
                segmentName = partName + 'Z' + segment.label

            startToken = getStartToken(
                humdrumFile, track, segment.startLine, segment.endLine
            )
            tokens: t.List[HumdrumToken] = []
            if startToken is not None:
                tokens = segmentTokens(startToken, segment.endLine)

            startingPitch: t.Optional[int] = getSegmentStartingPitch(tokens)
            if startingPitch is not None:
                state = state.withPitch(startingPitch)

            result = renderer.renderSegment(tokens, state)
            self.diagnostics.extend(result.diagnostics)
            if not result.success:
                return False, '', []

            state = result.state
            output += segmentName + ' ='
            output += startingPitchToLilypond(startingPitch)
            output += ' {\n'
            output += result.text
            output += '}\n\n'
            segmentNames.append(segmentName)

        return True, output, segmentNames

    @staticmethod
    def headerComments(humdrumFile: HumdrumFile) -> str:
        # global comments before the first data, barline, or interpretation
        # (other than **kern etc)
        output: str = ''
        for line in humdrumFile.lines():
            if line.isData or line.isBarline:
                break
            if line.isInterpretation and not line.isExclusiveInterpretation:
                break
            if line.hasSpines or not line.text:
                continue
            output += commentLineToLilypond(line.text) + '\n'

        if output:
            output += '\n'
        return output

    @staticmethod
    def footerComments(humdrumFile: HumdrumFile) -> str:
        # global comments after the last data, barline, or interpretation
        # (other than *-)
        commentLines: t.List[str] = []
        for i in range(humdrumFile.lineCount - 1, 0, -1):
            line = humdrumFile[i]
            if line.isData or line.isBarline:
                break
            if line.isInterpretation and not line.isTerminateInterpretation:
                break
            if line.hasSpines or not line.text:
                continue
            commentLines.append(commentLineToLilypond(line.text))

        if not commentLines:
            return ''
        return '\n' + ''.join(text + '\n' for text in reversed(commentLines))
