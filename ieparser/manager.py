# -*- coding: utf-8 -*-
#
# ieparser : an 802.11 HT/VHT information element decoder
# Copyright : (c) 2021 ieparser contributors
# License : BSD-3-Clause
# Maintainer : ieparser contributors


"""
ieparser.manager
~~~~~~~~~~~~~~~~

handle ieparser
"""

# standard library imports
import argparse
import inspect
import logging
import platform
import sys

# third party imports
import scapy  # type: ignore
from scapy.all import rdpcap  # type: ignore
from scapy.error import Scapy_Exception  # type: ignore

# app imports
from . import helpers
from .__version__ import __version__


def start(args: argparse.Namespace):
    """Begin work"""
    log = logging.getLogger(inspect.stack()[0][3])

    if args.pytest:
        sys.exit("pytest")

    helpers.setup_logger(args)

    log.debug("%s version %s", __name__.split(".")[0], __version__)
    log.debug("python platform version is %s", platform.python_version())
    try:
        log.debug("scapy version is %s", scapy.__version__)
    except AttributeError:
        log.exception("could not get version information from scapy.__version__")
    log.debug("args: %s", args)

    config = helpers.setup_config(args)
    log.debug("config %s", config)
    helpers.verify_reporting_directories(config)

    from .analyzer import Analyzer

    analyzer = Analyzer(config)

    pcap_analysis = config.get("GENERAL").get("pcap_analysis")
    if args.hex_buffer is not None:
        analyze_hex(analyzer, args.hex_buffer)
    elif pcap_analysis:
        analyze_pcap(analyzer, pcap_analysis)
    else:
        log.error("nothing to decode, provide --hex or --read... exiting...")
        sys.exit(-1)

    log.debug(
        "%s buffers decoded, %s failed", analyzer.analyzed_count, analyzer.failed_count
    )


def analyze_hex(analyzer, buffer: bytes) -> None:
    """Decode a single buffer passed on the command line"""
    log = logging.getLogger(inspect.stack()[0][3])
    settings = analyzer.analyze_buffer(buffer)
    if settings is None:
        log.info("nothing to report for %s byte buffer", len(buffer))
        return
    print(analyzer.report(settings, buffer))


def analyze_pcap(analyzer, pcap_analysis: str) -> None:
    """Decode every beacon and probe response in a capture file"""
    log = logging.getLogger(inspect.stack()[0][3])
    log.info("decoding beacons and probe responses from %s", pcap_analysis)
    try:
        frames = rdpcap(pcap_analysis)
    except FileNotFoundError:
        log.exception("could not find file %s", pcap_analysis)
        print("exiting...")
        sys.exit(-1)
    except Scapy_Exception:
        log.exception("could not read %s", pcap_analysis)
        print("exiting...")
        sys.exit(-1)

    results = analyzer.analyze_frames(frames)
    log.info("%s frames read, %s unique BSS settings found", len(frames), len(results))
    for result in results:
        print(
            analyzer.report(
                result["settings"],
                result["buffer"],
                result["bssid"],
                result["ssid"],
                result["manuf"],
            )
        )
