# -*- coding: utf-8 -*-
#
# ieparser : an 802.11 HT/VHT information element decoder
# Copyright : (c) 2021 ieparser contributors
# License : BSD-3-Clause
# Maintainer : ieparser contributors

"""
ieparser.elements
~~~~~~~~~~~~~~~~~

split a buffer of 802.11 information elements into (id, length, payload)
records.

Does not handle headers or FCS. You must strip those before passing the
buffer in.
"""

# standard library imports
from dataclasses import dataclass
from typing import Iterator, List, Union

# app imports
from .constants import IE_HEADER_LENGTH
from .errors import InvalidBufferError, TruncatedElementError

Buffer = Union[bytes, bytearray, memoryview, List[int]]


@dataclass(frozen=True)
class InformationElement:
    """A single tag-length-value element"""

    element_id: int
    length: int
    payload: bytes


def iter_information_elements(buffer: Buffer) -> Iterator[InformationElement]:
    """Yield the elements of an IE buffer in order

    Raises InvalidBufferError when the buffer holds values outside 0-255.
    Raises TruncatedElementError when a header or payload runs past the end of
    the buffer. Elements before the truncated one have already been yielded.
    """
    try:
        buffer = bytes(buffer)
    except (TypeError, ValueError) as error:
        raise InvalidBufferError(f"not a byte buffer: {error}") from error
    size = len(buffer)
    index = 0
    while index < size:
        if size - index < IE_HEADER_LENGTH:
            raise TruncatedElementError(
                f"element header at offset {index} needs {IE_HEADER_LENGTH} bytes, {size - index} remain",
                needed=IE_HEADER_LENGTH,
                available=size - index,
            )
        element_id = buffer[index]
        element_length = buffer[index + 1]
        start = index + IE_HEADER_LENGTH
        end = start + element_length
        if end > size:
            raise TruncatedElementError(
                f"element {element_id} at offset {index} declares {element_length} bytes, {size - start} remain",
                element_id=element_id,
                needed=element_length,
                available=size - start,
            )
        yield InformationElement(element_id, element_length, buffer[start:end])
        index = end


def build_information_elements(buffer: Buffer) -> List[InformationElement]:
    """Parse an IE buffer and return a list of its elements"""
    return list(iter_information_elements(buffer))
