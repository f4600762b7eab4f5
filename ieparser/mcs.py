# -*- coding: utf-8 -*-
#
# ieparser : an 802.11 HT/VHT information element decoder
# Copyright : (c) 2021 ieparser contributors
# License : BSD-3-Clause
# Maintainer : ieparser contributors

"""
ieparser.mcs
~~~~~~~~~~~~

HT MCS index to data rate lookup.

The rate tables hold the single stream rate (Mb/s) for MCS 0-7 and are
truncated to whole numbers (6.5 -> 6, 13.5 -> 13, 72.2 -> 72). MCS 8-31 reuse
the same modulation and coding as 0-7 with 2, 3 or 4 spatial streams, so the
rate is the base rate multiplied by the stream count.
"""

# standard library imports
from typing import Tuple

# 20 MHz long GI
LGI_20MHZ = (6.0, 13.0, 19.0, 26.0, 39.0, 52.0, 58.0, 65.0)

# 20 MHz short GI
SGI_20MHZ = (7.0, 14.0, 22.0, 29.0, 43.0, 58.0, 65.0, 72.0)

# 40 MHz long GI
LGI_40MHZ = (13.0, 27.0, 40.0, 54.0, 81.0, 108.0, 121.0, 135.0)

# 40 MHz short GI
SGI_40MHZ = (15.0, 30.0, 45.0, 60.0, 90.0, 120.0, 135.0, 150.0)

# highest MCS index defined for HT
MAX_HT_MCS_INDEX = 32

# MCS indexes per spatial stream band
MCS_PER_STREAM = 8

MAX_SPATIAL_STREAMS = 4


def mcs_streams(index: int) -> Tuple[int, int]:
    """
    Given an MCS index, returns a tuple (spatial streams, index within the band)

    Indexes outside the four 8-wide bands (32 and up) have 0 streams.
    """
    if index < 0:
        raise ValueError("mcs index {0} must not be negative".format(index))
    streams, sub_index = divmod(index, MCS_PER_STREAM)
    if streams >= MAX_SPATIAL_STREAMS:
        return 0, sub_index
    return streams + 1, sub_index


def rate_table(short_gi_20mhz: bool, short_gi_40mhz: bool, is_40mhz: bool) -> Tuple[float, ...]:
    """Select the base rate table for a channel width and guard interval"""
    if is_40mhz:
        return SGI_40MHZ if short_gi_40mhz else LGI_40MHZ
    return SGI_20MHZ if short_gi_20mhz else LGI_20MHZ


def get_speed(index: int, short_gi_20mhz: bool, short_gi_40mhz: bool, is_40mhz: bool) -> float:
    """
    Given an MCS index, guard interval flags and channel width, returns the data rate

    Returns 0 for indexes with no rate in the tables (32 and above).
    """
    if index > MAX_HT_MCS_INDEX:
        return 0.0
    streams, sub_index = mcs_streams(index)
    if not streams:
        return 0.0
    return rate_table(short_gi_20mhz, short_gi_40mhz, is_40mhz)[sub_index] * streams
