# ------------------------------------------------------------------------------
# Name:          lyexceptions.py
# Purpose:       Exceptions that can be raised during LilyPond export.
#
# Authors:       Greg Chapman <gregc@mac.com>
#
# Copyright:     (c) 2024 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------
import typing as t

from converter21.humdrum import HumdrumToken

class LilypondExportError(Exception):
    '''When an error occurs while converting to LilyPond.'''
    pass

class LilypondUnsupportedError(LilypondExportError):
    '''When the Humdrum data contains something we cannot (yet) export, e.g. a chord.'''
    def __init__(self, message: str, token: t.Optional[HumdrumToken] = None) -> None:
        super().__init__(message)
        self.token: t.Optional[HumdrumToken] = token
