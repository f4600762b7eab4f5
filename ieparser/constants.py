# -*- coding: utf-8 -*-
#
# ieparser : an 802.11 HT/VHT information element decoder
# Copyright : (c) 2021 ieparser contributors
# License : BSD-3-Clause
# Maintainer : ieparser contributors

"""
ieparser.constants
~~~~~~~~~~~~~~~~~~

define constant values for app
"""

CONFIG_FILE = "/etc/ieparser/config.ini"

SSID_PARAMETER_SET_IE_TAG = 0
HT_CAPABILITIES_IE_TAG = 45  # 802.11n
HT_OPERATION_IE_TAG = 61  # 802.11n (HT Information)
VHT_CAPABILITIES_IE_TAG = 191  # 802.11ac
VHT_OPERATION_IE_TAG = 192  # 802.11ac

# bytes of the element header (id and length)
IE_HEADER_LENGTH = 2

# minimum payload lengths required by each decoder
HT_CAPABILITIES_MIN_LENGTH = 8
HT_OPERATION_MIN_LENGTH = 2
VHT_CAPABILITIES_MIN_LENGTH = 12
VHT_OPERATION_MIN_LENGTH = 5

# HT capabilities info (octet 0)
HT_CAP_40MHZ_MASK = 0x02
HT_CAP_SGI_20MHZ_MASK = 0x20
HT_CAP_SGI_40MHZ_MASK = 0x40
HT_CAP_MCS_SET_OFFSET = 4
HT_CAP_MCS_SET_LENGTH = 4

# HT operation
HT_OP_PRIMARY_CHANNEL_OCTET = 0
HT_OP_SUBSET_1_OCTET = 1
HT_OP_SECONDARY_CHANNEL_MASK = 0x03

# VHT capabilities info (octet 0)
VHT_CAP_SGI_80MHZ_MASK = 0x20
VHT_CAP_SGI_160MHZ_MASK = 0x40
VHT_CAP_SUPPORTED_WIDTH_MASK = 0x0C
VHT_CAP_SUPPORTED_WIDTH_SHIFT = 2
VHT_CAP_MCS_SET_OFFSET = 4
VHT_CAP_MCS_SET_LENGTH = 8
# offsets inside the supported VHT-MCS and NSS set
VHT_CAP_RX_HIGHEST_RATE_OFFSET = 2
VHT_CAP_TX_HIGHEST_RATE_OFFSET = 6

MODES = ("ht", "vht")
