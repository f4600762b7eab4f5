# -*- coding: utf-8 -*-
#
# ieparser : an 802.11 HT/VHT information element decoder
# Copyright : (c) 2021 ieparser contributors
# License : BSD-3-Clause
# Maintainer : ieparser contributors

"""
ieparser.parser
~~~~~~~~~~~~~~~

decode HT and VHT capability/operation elements from an IE buffer.

Elements are handled in buffer order. The HT Operation element only narrows
is_40mhz if an HT Capabilities element set it earlier, so reordering the
elements in a buffer can change the result.
"""

# standard library imports
import logging
import struct
from typing import Optional, Union

# app imports
from .constants import (HT_CAP_40MHZ_MASK, HT_CAP_MCS_SET_LENGTH,
                        HT_CAP_MCS_SET_OFFSET, HT_CAP_SGI_20MHZ_MASK,
                        HT_CAP_SGI_40MHZ_MASK, HT_CAPABILITIES_IE_TAG,
                        HT_CAPABILITIES_MIN_LENGTH, HT_OP_PRIMARY_CHANNEL_OCTET,
                        HT_OP_SECONDARY_CHANNEL_MASK, HT_OP_SUBSET_1_OCTET,
                        HT_OPERATION_IE_TAG, HT_OPERATION_MIN_LENGTH,
                        VHT_CAP_MCS_SET_OFFSET, VHT_CAP_RX_HIGHEST_RATE_OFFSET,
                        VHT_CAP_SGI_80MHZ_MASK, VHT_CAP_SGI_160MHZ_MASK,
                        VHT_CAP_SUPPORTED_WIDTH_MASK,
                        VHT_CAP_SUPPORTED_WIDTH_SHIFT,
                        VHT_CAP_TX_HIGHEST_RATE_OFFSET,
                        VHT_CAPABILITIES_IE_TAG, VHT_CAPABILITIES_MIN_LENGTH,
                        VHT_OPERATION_IE_TAG, VHT_OPERATION_MIN_LENGTH)
from .elements import Buffer, InformationElement, iter_information_elements
from .errors import TruncatedElementError, UnknownEnumValueError
from .helpers import get_bit
from .mcs import get_speed
from .models import (DecodeMode, HtSettings, VhtCapabilities, VhtChannelWidth,
                     VhtOperation, VhtSettings, VhtSupportedWidth)

log = logging.getLogger(__name__)

Settings = Union[HtSettings, VhtSettings]


def _require(ie: InformationElement, length: int) -> None:
    """Check the element carries at least `length` payload bytes"""
    if len(ie.payload) < length:
        raise TruncatedElementError(
            f"element {ie.element_id} needs {length} bytes, has {len(ie.payload)}",
            element_id=ie.element_id,
            needed=length,
            available=len(ie.payload),
        )


def parse_ht_capabilities(ie: InformationElement, settings: HtSettings) -> None:
    """Decode an HT Capabilities element (45) into settings"""
    _require(ie, HT_CAPABILITIES_MIN_LENGTH)
    data = ie.payload

    settings.is_40mhz = (data[0] & HT_CAP_40MHZ_MASK) == HT_CAP_40MHZ_MASK
    settings.short_gi_20mhz = (data[0] & HT_CAP_SGI_20MHZ_MASK) == HT_CAP_SGI_20MHZ_MASK
    settings.short_gi_40mhz = (data[0] & HT_CAP_SGI_40MHZ_MASK) == HT_CAP_SGI_40MHZ_MASK

    # supported MCS set is one bit per index, little endian, so walking the
    # bits in order starts at the lowest rates
    mcs_set = data[HT_CAP_MCS_SET_OFFSET : HT_CAP_MCS_SET_OFFSET + HT_CAP_MCS_SET_LENGTH]
    for octet_index, octet in enumerate(mcs_set):
        for bit_position in range(8):
            if not get_bit(octet, bit_position):
                continue
            settings.rates.append(
                get_speed(
                    octet_index * 8 + bit_position,
                    settings.short_gi_20mhz,
                    settings.short_gi_40mhz,
                    settings.is_40mhz,
                )
            )


def parse_ht_operation(ie: InformationElement, settings: HtSettings) -> None:
    """Decode an HT Operation element (61) into settings"""
    _require(ie, HT_OPERATION_MIN_LENGTH)
    data = ie.payload

    settings.primary_channel = data[HT_OP_PRIMARY_CHANNEL_OCTET]

    settings.secondary_channel_lower = (
        data[HT_OP_PRIMARY_CHANNEL_OCTET] & HT_OP_SECONDARY_CHANNEL_MASK
    ) == HT_OP_SECONDARY_CHANNEL_MASK

    # no secondary channel means no 40 MHz
    if settings.is_40mhz:
        subset_1 = data[HT_OP_SUBSET_1_OCTET]
        settings.is_40mhz = (subset_1 & 0x03) == 0x03 or (subset_1 & 0x01) == 0x01


def parse_vht_capabilities(ie: InformationElement) -> VhtCapabilities:
    """Decode a VHT Capabilities element (191)"""
    _require(ie, VHT_CAPABILITIES_MIN_LENGTH)
    data = ie.payload
    capabilities = VhtCapabilities()

    capabilities.short_gi_160mhz = (data[0] & VHT_CAP_SGI_160MHZ_MASK) == VHT_CAP_SGI_160MHZ_MASK
    capabilities.short_gi_80mhz = (data[0] & VHT_CAP_SGI_80MHZ_MASK) == VHT_CAP_SGI_80MHZ_MASK

    (capabilities.max_receive_rate,) = struct.unpack_from(
        "<H", data, VHT_CAP_MCS_SET_OFFSET + VHT_CAP_RX_HIGHEST_RATE_OFFSET
    )
    (capabilities.max_transmit_rate,) = struct.unpack_from(
        "<H", data, VHT_CAP_MCS_SET_OFFSET + VHT_CAP_TX_HIGHEST_RATE_OFFSET
    )

    supported_channel_width = (
        data[0] & VHT_CAP_SUPPORTED_WIDTH_MASK
    ) >> VHT_CAP_SUPPORTED_WIDTH_SHIFT
    try:
        capabilities.supported_width = VhtSupportedWidth(supported_channel_width)
    except ValueError:
        raise UnknownEnumValueError("supported_width", supported_channel_width) from None

    return capabilities


def parse_vht_operation(ie: InformationElement) -> VhtOperation:
    """Decode a VHT Operation element (192)"""
    _require(ie, VHT_OPERATION_MIN_LENGTH)
    channel_width = ie.payload[0]
    try:
        return VhtOperation(channel_width=VhtChannelWidth(channel_width))
    except ValueError:
        raise UnknownEnumValueError("channel_width", channel_width) from None


def decode(buffer: Buffer, mode: DecodeMode = DecodeMode.HT) -> Optional[Settings]:
    """
    Decode an IE buffer into HT (or HT and VHT) settings

    Returns None when the buffer has no HT Capabilities or HT Operation
    element. Decode failures are raised, no partial settings are returned.
    """
    vht = mode is DecodeMode.HT_AND_VHT
    ht_settings = HtSettings()
    vht_settings = VhtSettings(ht=ht_settings) if vht else None
    found = False

    for ie in iter_information_elements(buffer):
        if ie.element_id == HT_CAPABILITIES_IE_TAG:
            parse_ht_capabilities(ie, ht_settings)
            found = True
        elif ie.element_id == HT_OPERATION_IE_TAG:
            parse_ht_operation(ie, ht_settings)
            found = True
        elif vht and ie.element_id == VHT_CAPABILITIES_IE_TAG:
            vht_settings.capabilities = parse_vht_capabilities(ie)
        elif vht and ie.element_id == VHT_OPERATION_IE_TAG:
            vht_settings.operation = parse_vht_operation(ie)
        else:
            log.debug("ignoring element %s (%s bytes)", ie.element_id, ie.length)

    if not found:
        log.debug("no HT capabilities or HT operation element found")
        return None
    return vht_settings if vht else ht_settings


def parse(buffer: Buffer) -> Optional[HtSettings]:
    """Decode the HT elements of an IE buffer"""
    return decode(buffer, DecodeMode.HT)


def parse_ac(buffer: Buffer) -> Optional[VhtSettings]:
    """Decode the HT and VHT elements of an IE buffer"""
    return decode(buffer, DecodeMode.HT_AND_VHT)
