# ------------------------------------------------------------------------------
# Name:          lilypond/__init__.py
# Purpose:       Allows "from hum2ly.lilypond import HumdrumToLilypondConverter" et al
#                instead of "from hum2ly.lilypond.lywriter import HumdrumToLilypondConverter".
#
# Authors:       Greg Chapman <gregc@mac.com>
#
# Copyright:     (c) 2024 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------
from .lyexceptions import LilypondExportError, LilypondUnsupportedError
from .lydiagnostics import DiagnosticKind, Diagnostic, diagnosticsToPreamble
from .lystate import StateVariables

from .lyduration import convertDuration, durationToLilypond
from .lypitch import convertPitch, base40FromParts, base40ToRegister
from .lyclef import convertClef
from .lykeysignature import convertKeySignature, keySignatureToAccidentalCount
from .lysegment import Segment, extractSegments, getStartToken, segmentTokens

from .lyrenderer import TokenRenderer, SegmentResult
from .lywriter import HumdrumToLilypondConverter
