# -*- coding: utf-8 -*-
#
# ieparser : an 802.11 HT/VHT information element decoder
# Copyright : (c) 2021 ieparser contributors
# License : BSD-3-Clause
# Maintainer : ieparser contributors

"""
ieparser.models
~~~~~~~~~~~~~~~

records produced by the decoder
"""

# standard library imports
from dataclasses import asdict, dataclass, field
from enum import Enum, IntEnum
from typing import Any, Dict, List, Optional


class DecodeMode(Enum):
    """Which elements the decoder interprets"""

    HT = "ht"
    HT_AND_VHT = "vht"


class VhtSupportedWidth(IntEnum):
    Eighty = 0x00
    OneSixty = 0x01
    All = 0x02


class VhtChannelWidth(IntEnum):
    TwentyOrForty = 0x00
    Eighty = 0x01
    OneSixty = 0x02
    EightyPlusEighty = 0x03


@dataclass
class HtSettings:
    """802.11n settings from the HT Capabilities and HT Operation elements

    Rates are derived from the other fields and are not compared.
    """

    is_40mhz: bool = False
    short_gi_20mhz: bool = False
    short_gi_40mhz: bool = False
    primary_channel: int = 0
    secondary_channel_lower: bool = False
    rates: List[float] = field(default_factory=list, compare=False)

    def copy(self) -> "HtSettings":
        """Return an independent copy"""
        return HtSettings(
            is_40mhz=self.is_40mhz,
            short_gi_20mhz=self.short_gi_20mhz,
            short_gi_40mhz=self.short_gi_40mhz,
            primary_channel=self.primary_channel,
            secondary_channel_lower=self.secondary_channel_lower,
            rates=list(self.rates),
        )

    @property
    def max_rate(self) -> float:
        """Highest decoded HT rate, 0 when no MCS is supported"""
        return max(self.rates, default=0.0)

    def to_dict(self) -> Dict[str, Any]:
        """Return the settings as a JSON friendly dict"""
        return asdict(self)


@dataclass
class VhtCapabilities:
    """Fields from the VHT Capabilities element

    supports_160mhz and supports_80plus80mhz are never set by the decoder.
    """

    short_gi_80mhz: bool = False
    short_gi_160mhz: bool = False
    supports_160mhz: bool = False
    supports_80plus80mhz: bool = False
    max_receive_rate: int = 0
    max_transmit_rate: int = 0
    supported_width: VhtSupportedWidth = VhtSupportedWidth.Eighty

    def to_dict(self) -> Dict[str, Any]:
        """Return the capabilities as a JSON friendly dict"""
        _dict = asdict(self)
        _dict["supported_width"] = self.supported_width.name
        return _dict


@dataclass
class VhtOperation:
    channel_width: VhtChannelWidth = VhtChannelWidth.TwentyOrForty

    def to_dict(self) -> Dict[str, Any]:
        """Return the operation as a JSON friendly dict"""
        return {"channel_width": self.channel_width.name}


@dataclass
class VhtSettings:
    """HT settings plus whatever VHT elements were present"""

    ht: HtSettings = field(default_factory=HtSettings)
    capabilities: Optional[VhtCapabilities] = None
    operation: Optional[VhtOperation] = None

    def to_dict(self) -> Dict[str, Any]:
        """Return the HT and VHT records as a JSON friendly dict"""
        return {
            "ht": self.ht.to_dict(),
            "capabilities": self.capabilities.to_dict() if self.capabilities else None,
            "operation": self.operation.to_dict() if self.operation else None,
        }
