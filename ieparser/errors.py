# -*- coding: utf-8 -*-
#
# ieparser : an 802.11 HT/VHT information element decoder
# Copyright : (c) 2021 ieparser contributors
# License : BSD-3-Clause
# Maintainer : ieparser contributors

"""
ieparser.errors
~~~~~~~~~~~~~~~

exceptions raised while decoding information elements
"""

# standard library imports
from typing import Optional


class IEParserError(Exception):
    """Base class for information element decode failures"""


class TruncatedElementError(IEParserError):
    """An element header or payload claims more bytes than are available"""

    def __init__(self, message: str, element_id: Optional[int] = None, needed: int = 0, available: int = 0):
        super().__init__(message)
        self.element_id = element_id
        self.needed = needed
        self.available = available


class UnknownEnumValueError(IEParserError):
    """An encoded field holds a value outside its defined enumeration"""

    def __init__(self, field: str, value: int):
        super().__init__(f"{value} is not a valid value for {field}")
        self.field = field
        self.value = value


class InvalidBufferError(IEParserError):
    """The input cannot be read as a sequence of bytes"""
