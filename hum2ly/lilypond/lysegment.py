# ------------------------------------------------------------------------------
# Name:          lysegment.py
# Purpose:       Split a part into segments at its section labels (*>A etc),
#                and walk the tokens of one segment.
#
# Authors:       Greg Chapman <gregc@mac.com>
#
# Copyright:     (c) 2024 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------
import typing as t

from converter21.humdrum import HumdrumFile, HumdrumLine, HumdrumToken

LABEL_PREFIX_LENGTH: int = 2  # '*>'


class Segment:
    '''
        Lines [startLine, endLine) of a HumdrumFile, and the section label
        they start with (None if the file has no labels).
    '''
    def __init__(self, startLine: int, endLine: int, label: t.Optional[str] = None) -> None:
        self.startLine: int = startLine
        self.endLine: int = endLine
        self.label: t.Optional[str] = label

    def __repr__(self) -> str:
        return f'Segment({self.startLine}, {self.endLine}, {self.label!r})'

    def __eq__(self, other) -> bool:
        if not isinstance(other, Segment):
            return NotImplemented
        return (self.startLine == other.startLine
                and self.endLine == other.endLine
                and self.label == other.label)


def trackToken(line: HumdrumLine, track: int) -> t.Optional[HumdrumToken]:
    # first token in the line that belongs to track
    if not line.hasSpines:
        return None
    for token in line.tokens():
        if token.track == track:
            return token
    return None


def extractSegments(humdrumFile: HumdrumFile, track: int) -> t.List[Segment]:
    '''
        Labels that come before any data all start at line 0, as does the
        first label, even if it comes after some data (so there is never an
        unlabeled segment before the first labeled one).
    '''
    startLines: t.List[int] = []
    labels: t.List[str] = []
    beforeData: bool = True

    for i, line in enumerate(humdrumFile.lines()):
        if line.isData:
            beforeData = False
        if not line.isInterpretation:
            continue

        token = trackToken(line, track)
        if token is None or not token.isLabel:
            continue

        labels.append(token.text[LABEL_PREFIX_LENGTH:])
        if beforeData or not startLines:
            startLines.append(0)
        else:
            startLines.append(i)

    lineCount: int = humdrumFile.lineCount
    if not startLines:
        return [Segment(0, lineCount)]

    endLines: t.List[int] = startLines[1:] + [lineCount]
    return [Segment(start, end, label)
                for start, end, label in zip(startLines, endLines, labels)]


def getStartToken(
    humdrumFile: HumdrumFile,
    track: int,
    startLine: int,
    endLine: int
) -> t.Optional[HumdrumToken]:
    # the part's first token in the segment
    for i in range(startLine, endLine):
        token = trackToken(humdrumFile[i], track)
        if token is not None:
            return token
    return None


def segmentTokens(startToken: HumdrumToken, endLine: int) -> t.List[HumdrumToken]:
    '''
        All the tokens (of the first subspine) from startToken up to (not
        including) line endLine, minus any leading exclusive interpretation.
    '''
    output: t.List[HumdrumToken] = []
    token: t.Optional[HumdrumToken] = startToken
    while token is not None and token.lineIndex < endLine:
        nextToken = token.nextToken0
        if not (token.isExclusiveInterpretation and nextToken is not None):
            output.append(token)
        token = nextToken
    return output
