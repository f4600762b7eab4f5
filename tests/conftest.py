# -*- coding: utf-8 -*-
"""
Shared pytest fixtures for ieparser tests
"""

from unittest import mock

import pytest
from scapy.all import Dot11, Dot11Beacon, Dot11Elt, Dot11ProbeResp

BSSID = "00:11:22:33:44:55"

# HT capabilities: 40 MHz, MCS 0 only
HT_CAP_40MHZ_MCS0 = bytes([0x02, 0, 0, 0, 0x01, 0, 0, 0])

# HT capabilities: 20 MHz, short GI 20/40, MCS 0-15
HT_CAP_2SS = bytes([0x60, 0, 0, 0, 0xFF, 0xFF, 0, 0]) + bytes(18)

# HT operation: primary channel 36, secondary channel present
HT_OP_CH36 = bytes([36, 0x05, 0, 0, 0]) + bytes(17)

# VHT capabilities: 160 MHz supported width, 288/320 highest rates
VHT_CAP_160 = bytes([0x04, 0, 0, 0, 0, 0, 0x20, 0x01, 0, 0, 0x40, 0x01])

# VHT operation: 80 MHz
VHT_OP_80 = bytes([0x01, 42, 0, 0, 0])


def ie(element_id: int, payload: bytes) -> bytes:
    """Encode a single information element"""
    return bytes([element_id, len(payload)]) + payload


def build_frame(elements, bssid=BSSID, subtype=8):
    """Build a beacon (or probe response with subtype 5) carrying elements"""
    frame = Dot11(
        type=0, subtype=subtype, addr1="ff:ff:ff:ff:ff:ff", addr2=bssid, addr3=bssid
    )
    if subtype == 5:
        frame /= Dot11ProbeResp(cap=0x1101)
    else:
        frame /= Dot11Beacon(cap=0x1101)
    for element_id, info in elements:
        frame /= Dot11Elt(ID=element_id, info=info)
    return frame


@pytest.fixture
def ht_buffer():
    return ie(0, b"WLAN Pi") + ie(45, HT_CAP_2SS) + ie(61, HT_OP_CH36)


@pytest.fixture
def vht_buffer():
    return (
        ie(0, b"WLAN Pi")
        + ie(45, HT_CAP_2SS)
        + ie(61, HT_OP_CH36)
        + ie(191, VHT_CAP_160)
        + ie(192, VHT_OP_80)
    )


@pytest.fixture
def beacon():
    return build_frame(
        [
            (0, b"WLAN Pi"),
            (45, HT_CAP_2SS),
            (61, HT_OP_CH36),
            (191, VHT_CAP_160),
            (192, VHT_OP_80),
        ]
    )


@pytest.fixture
def mock_permission_error():
    """Fixture to mock file permission errors"""
    return mock.patch("builtins.open", side_effect=PermissionError("Permission denied"))
