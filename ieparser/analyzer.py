# -*- coding: utf-8 -*-
#
# ieparser : an 802.11 HT/VHT information element decoder
# Copyright : (c) 2021 ieparser contributors
# License : BSD-3-Clause
# Maintainer : ieparser contributors

"""
ieparser.analyzer
~~~~~~~~~~~~~~~~~

turn IE buffers and captured frames into reports, separate from the decoder.
"""

# standard library imports
import hashlib
import inspect
import json
import logging
import os
import signal
import sys
from time import strftime
from typing import Dict, List, Optional

# third party imports
from manuf import manuf  # type: ignore
from scapy.all import Dot11, Dot11Beacon, Dot11Elt, Dot11ProbeResp  # type: ignore

# app imports
from .__version__ import __version__
from .constants import SSID_PARAMETER_SET_IE_TAG
from .elements import build_information_elements
from .errors import IEParserError
from .helpers import Base64Encoder, Capability
from .models import DecodeMode, HtSettings, VhtSettings
from .parser import Settings, decode


def mode_from_config(config: Optional[Dict]) -> DecodeMode:
    """Map the configured mode string to a DecodeMode"""
    if config and config.get("GENERAL", {}).get("mode") == "ht":
        return DecodeMode.HT
    return DecodeMode.HT_AND_VHT


def checkbox(value: bool) -> str:
    return "[X]" if value else "[ ]"


class Analyzer(object):
    """ Code handling decoding and reporting of IE buffers """

    def __init__(self, config=None):
        self.log = logging.getLogger(inspect.stack()[0][1].split("/")[-1])
        self.config = config or {}
        self.mode = mode_from_config(self.config)
        self.json_output = self.config.get("GENERAL", {}).get("json", False)
        self.files_path = self.config.get("GENERAL", {}).get("files_path")
        self.lookup = manuf.MacParser(update=False)
        self.analyzed_count = 0
        self.failed_count = 0

    @staticmethod
    def extract_ie_buffer(frame) -> bytes:
        """Return the raw information elements carried by a management frame"""
        if not frame.haslayer(Dot11Elt):
            return b""
        return bytes(frame.getlayer(Dot11Elt))

    @staticmethod
    def analyze_ssid_ie(buffer: bytes) -> Optional[str]:
        """Pull the SSID out of an IE buffer"""
        try:
            elements = build_information_elements(buffer)
        except IEParserError:
            return None
        for element in elements:
            if element.element_id == SSID_PARAMETER_SET_IE_TAG:
                return element.payload.decode("utf-8", errors="replace")
        return None

    def resolve_oui_manuf(self, mac: str) -> Optional[str]:
        """ Resolve the BSSID manuf using manuf database """
        log = logging.getLogger(inspect.stack()[0][3])
        oui_manuf = self.lookup.get_manuf(mac)
        log.debug("finished oui lookup for %s: %s", mac, oui_manuf)
        return oui_manuf

    def analyze_buffer(self, buffer: bytes) -> Optional[Settings]:
        """Decode a buffer, logging and swallowing decode failures"""
        try:
            settings = decode(buffer, self.mode)
        except IEParserError as error:
            self.failed_count += 1
            self.log.warning("could not decode information elements: %s", error)
            return None
        self.analyzed_count += 1
        if settings is None:
            self.log.info("no HT or VHT information elements found")
        return settings

    def analyze_frame(self, frame) -> Optional[Dict]:
        """Decode one beacon or probe response frame"""
        if not (frame.haslayer(Dot11Beacon) or frame.haslayer(Dot11ProbeResp)):
            return None
        bssid = frame.getlayer(Dot11).addr3
        buffer = self.extract_ie_buffer(frame)
        settings = self.analyze_buffer(buffer)
        if settings is None:
            return None
        return {
            "bssid": bssid,
            "ssid": self.analyze_ssid_ie(buffer),
            "manuf": self.resolve_oui_manuf(bssid) if bssid else None,
            "buffer": buffer,
            "settings": settings,
        }

    def analyze_frames(self, frames) -> List[Dict]:
        """Decode every beacon and probe response, once per BSSID and settings"""
        seen = set()
        results = []
        for frame in frames:
            result = self.analyze_frame(frame)
            if result is None:
                continue
            key = (result["bssid"], json.dumps(result["settings"].to_dict()))
            if key in seen:
                self.log.debug("already seen %s with the same settings", result["bssid"])
                continue
            seen.add(key)
            results.append(result)
        return results

    @staticmethod
    def get_capabilities(settings: Settings) -> List[Capability]:
        """Flatten decoded settings into report rows"""
        if isinstance(settings, VhtSettings):
            ht = settings.ht
        else:
            ht = settings
        capabilities: List[Capability] = []
        capabilities.extend(Analyzer.get_ht_capabilities(ht))
        if isinstance(settings, VhtSettings):
            capabilities.extend(Analyzer.get_vht_capabilities(settings))
        return capabilities

    @staticmethod
    def get_ht_capabilities(ht: HtSettings) -> List[Capability]:
        rates = ", ".join(f"{rate:g}" for rate in ht.rates) or "None"
        return [
            Capability(name="40 MHz", value=checkbox(ht.is_40mhz), db_key="ht_40_mhz", db_value=int(ht.is_40mhz)),
            Capability(name="Short GI 20 MHz", value=checkbox(ht.short_gi_20mhz), db_key="ht_sgi_20_mhz", db_value=int(ht.short_gi_20mhz)),
            Capability(name="Short GI 40 MHz", value=checkbox(ht.short_gi_40mhz), db_key="ht_sgi_40_mhz", db_value=int(ht.short_gi_40mhz)),
            Capability(name="Primary channel", value=ht.primary_channel, db_key="ht_primary_channel", db_value=ht.primary_channel),
            Capability(name="Secondary below", value=checkbox(ht.secondary_channel_lower), db_key="ht_secondary_channel_lower", db_value=int(ht.secondary_channel_lower)),
            Capability(name="HT rates (Mb/s)", value=rates, db_key="ht_rates", db_value=list(ht.rates)),
            Capability(name="HT max rate", value=f"{ht.max_rate:g}", db_key="ht_max_rate", db_value=ht.max_rate),
        ]

    @staticmethod
    def get_vht_capabilities(settings: VhtSettings) -> List[Capability]:
        capabilities = []
        cap = settings.capabilities
        if cap is None:
            capabilities.append(Capability(name="VHT capabilities", value="Not reported*", db_key="vht_capabilities", db_value=0))
        else:
            capabilities.extend(
                [
                    Capability(name="Short GI 80 MHz", value=checkbox(cap.short_gi_80mhz), db_key="vht_sgi_80_mhz", db_value=int(cap.short_gi_80mhz)),
                    Capability(name="Short GI 160 MHz", value=checkbox(cap.short_gi_160mhz), db_key="vht_sgi_160_mhz", db_value=int(cap.short_gi_160mhz)),
                    Capability(name="Supported width", value=cap.supported_width.name, db_key="vht_supported_width", db_value=int(cap.supported_width)),
                    Capability(name="Max Rx rate", value=cap.max_receive_rate, db_key="vht_max_rx_rate", db_value=cap.max_receive_rate),
                    Capability(name="Max Tx rate", value=cap.max_transmit_rate, db_key="vht_max_tx_rate", db_value=cap.max_transmit_rate),
                ]
            )
        if settings.operation is None:
            capabilities.append(Capability(name="VHT operation", value="Not reported*", db_key="vht_operation", db_value=0))
        else:
            width = settings.operation.channel_width
            capabilities.append(Capability(name="Channel width", value=width.name, db_key="vht_channel_width", db_value=int(width)))
        return capabilities

    @staticmethod
    def generate_text_report(
        capabilities: List[Capability],
        bssid: Optional[str] = None,
        ssid: Optional[str] = None,
        oui_manuf: Optional[str] = None,
    ) -> str:
        """ Generate a report for output """
        # start report
        text_report = "-" * 45
        if ssid is not None:
            text_report += f"\n - SSID: {ssid}"
        if bssid is not None:
            text_report += f"\n - BSSID: {bssid}"
            text_report += f"\n - OUI manufacturer lookup: {oui_manuf or 'Unknown'}"
        text_report += "\n"
        text_report += "-" * 45
        text_report += "\n"
        for capability in capabilities:
            if capability.name is not None and capability.value is not None:
                text_report += (
                    "{0:<20} {1:<20}".format(capability.name, str(capability.value)) + "\n"
                )

        text_report += "\nKey: [X]: Supported, [ ]: Not supported"
        text_report += "\n* Element not present in the buffer."
        return text_report

    def generate_json_report(self, settings: Settings, buffer: bytes, bssid=None, ssid=None, oui_manuf=None) -> Dict:
        data = {}
        data["bssid"] = bssid
        data["ssid"] = ssid
        data["manuf"] = oui_manuf
        data["mode"] = self.mode.value
        features = {}
        for capability in self.get_capabilities(settings):
            if capability.db_key:
                features[capability.db_key] = capability.db_value
        data["features"] = features
        data["settings"] = settings.to_dict()
        data["ies"] = json.loads(json.dumps(bytes(buffer), cls=Base64Encoder))
        data["schema_version"] = 1
        data["ieparser_version"] = __version__
        return data

    def report(self, settings: Settings, buffer: bytes, bssid=None, ssid=None, oui_manuf=None) -> str:
        """Build the configured report and write it out if a files path is set"""
        if self.json_output or self.files_path:
            data = self.generate_json_report(settings, buffer, bssid, ssid, oui_manuf)
        if self.files_path:
            self.write_analysis_to_file_system(data, bssid)
        if self.json_output:
            return json.dumps(data, indent=2)
        return self.generate_text_report(self.get_capabilities(settings), bssid, ssid, oui_manuf)

    def write_analysis_to_file_system(self, data: Dict, bssid: Optional[str] = None) -> str:
        """ Write a JSON report file to the files path

        A BSSID already reported with different settings gets a second file
        suffixed with a digest of its settings.
        """
        log = logging.getLogger(inspect.stack()[0][3])
        if bssid:
            name = bssid.replace(":", "-", 5)
        else:
            name = f"ies_{strftime('%Y%m%dt%H%M%S')}"
        json_filename = os.path.join(self.files_path, f"{name}.json")
        try:
            if os.path.exists(json_filename):
                with open(json_filename, "r") as _file:
                    try:
                        existing_json = json.load(_file)
                    except ValueError:
                        existing_json = {}
                if existing_json.get("settings") != data.get("settings"):
                    # same BSS reporting different settings, keep both
                    digest = hashlib.sha1(
                        json.dumps(data.get("settings"), sort_keys=True).encode()
                    ).hexdigest()[:8]
                    json_filename = os.path.join(
                        self.files_path, f"{name}_diff.{digest}.json"
                    )
            with open(json_filename, "w") as writer:
                json.dump(data, writer)
        except OSError:
            log.exception("error writing report to %s", json_filename)
            sys.exit(signal.SIGHUP)
        log.debug("wrote report to %s", json_filename)
        return json_filename
