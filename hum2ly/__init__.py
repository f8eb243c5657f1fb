# ------------------------------------------------------------------------------
# Purpose:       hum2ly is a Humdrum (**kern) to LilyPond converter, built on
#                converter21's Humdrum parser.
#
# Authors:       Greg Chapman <gregc@mac.com>
#
# Copyright:     (c) 2024 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------

__all__ = [
    'lilypond',
    'HumdrumToLilypondConverter',
    'LilypondExportError',
    'LilypondUnsupportedError',
]

from .lilypond import HumdrumToLilypondConverter
from .lilypond import LilypondExportError, LilypondUnsupportedError
