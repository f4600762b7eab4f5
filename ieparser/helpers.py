# -* coding: utf-8 -*-
#
# ieparser : an 802.11 HT/VHT information element decoder
# Copyright : (c) 2021 ieparser contributors
# License : BSD-3-Clause
# Maintainer : ieparser contributors

"""
ieparser.helpers
~~~~~~~~~~~~~~~~

provides init functions that are used to help setup the app.
"""

# standard library imports
import argparse
import configparser
import inspect
import json
import logging
import logging.config
import os
import string
from base64 import b64encode
from dataclasses import dataclass
from typing import Any, Dict, List, Union

# app imports
from .__version__ import __version__
from .constants import CONFIG_FILE, MODES

_TRUE_STRINGS = ("y", "yes", "t", "true", "on", "1")
_FALSE_STRINGS = ("n", "no", "f", "false", "off", "0")


def setup_logger(args) -> None:
    """Configure and set logging levels"""
    if args.logging:
        if args.logging == "debug":
            logging_level = logging.DEBUG
        if args.logging == "warning":
            logging_level = logging.WARNING
    else:
        logging_level = logging.INFO
    if args.debug:
        logging_level = logging.DEBUG

    default_logging = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {"format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s"}
        },
        "handlers": {
            "default": {
                "level": logging_level,
                "formatter": "standard",
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stdout",
            }
        },
        "loggers": {"": {"handlers": ["default"], "level": logging_level}},
    }
    logging.config.dictConfig(default_logging)


def hex_buffer(value: str) -> bytes:
    """Check if value is a hex encoded IE buffer and convert it to bytes"""
    cleaned = "".join(c for c in value if c not in " :-\t")
    if cleaned.lower().startswith("0x"):
        cleaned = cleaned[2:]
    if not all(c in string.hexdigits for c in cleaned):
        raise ValueError("%s is not a hex string" % value)
    if len(cleaned) % 2:
        raise ValueError("%s has an odd number of hex digits" % value)
    return bytes.fromhex(cleaned)


def setup_parser() -> argparse.ArgumentParser:
    """Set default values and handle arg parser"""
    parser = argparse.ArgumentParser(
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="ieparser decodes 802.11 HT and VHT information elements into capability settings",
    )
    parser.add_argument(
        "--pytest",
        dest="pytest",
        action="store_true",
        default=False,
        help=argparse.SUPPRESS,
    )
    source_group = parser.add_mutually_exclusive_group()
    source_group.add_argument(
        "--hex",
        dest="hex_buffer",
        type=hex_buffer,
        metavar="HEX",
        help="decode an information element buffer given as hex",
    )
    source_group.add_argument(
        "--read",
        dest="pcap_analysis",
        metavar="FILE",
        help="decode beacons and probe responses from a pcap file",
    )
    parser.add_argument(
        "--mode",
        dest="mode",
        choices=MODES,
        help="decode HT elements only or HT and VHT elements (default: vht)",
    )
    parser.add_argument(
        "--json",
        dest="json",
        action="store_true",
        default=False,
        help="output decoded settings as JSON",
    )
    parser.add_argument(
        "--config",
        type=str,
        metavar="FILE",
        default=CONFIG_FILE,
        help="customize path for configuration file (default: %(default)s)",
    )
    parser.add_argument(
        "--files_path",
        metavar="PATH",
        dest="files_path",
        help="write JSON reports to this directory",
    )
    parser.add_argument(
        "--debug",
        dest="debug",
        action="store_true",
        default=False,
        help="enable debug logging output",
    )
    parser.add_argument(
        "--logging",
        help="change logging output",
        nargs="?",
        choices=("debug", "warning"),
    )
    parser.add_argument("-V", "--version", action="version", version=f"{__version__}")
    return parser


def setup_config(args) -> Dict:
    """Create the configuration (decode mode, output format, report path)"""
    log = logging.getLogger(inspect.stack()[0][3])

    # load in config (a: from default location "/etc/ieparser/config.ini" or b: from provided)
    if os.path.isfile(args.config):
        parser = load_config(args.config)

        # we want to work with a dict whether we have config.ini or not
        config = convert_configparser_to_dict(parser)
    else:
        log.debug("can not find config at %s", args.config)
        config = {}

    if "GENERAL" not in config:
        config["GENERAL"] = {}

    config["GENERAL"].setdefault("mode", "vht")
    config["GENERAL"].setdefault("json", False)

    # handle args
    #  - args passed in take precedent over config.ini values
    if args.mode:
        config["GENERAL"]["mode"] = args.mode
    if args.json:
        config["GENERAL"]["json"] = args.json
    if args.files_path:
        config["GENERAL"]["files_path"] = args.files_path
    if args.pcap_analysis:
        config["GENERAL"]["pcap_analysis"] = args.pcap_analysis

    mode = str(config["GENERAL"]["mode"]).lower()
    if mode not in MODES:
        log.warning("unknown mode %s in config, using vht", mode)
        mode = "vht"
    config["GENERAL"]["mode"] = mode

    return config


def strtobool(value: str) -> bool:
    """Convert a string representation of truth to True or False"""
    value = value.lower()
    if value in _TRUE_STRINGS:
        return True
    if value in _FALSE_STRINGS:
        return False
    raise ValueError("invalid truth value %r" % (value,))


def convert_configparser_to_dict(config: configparser.ConfigParser) -> Dict:
    """
    Convert ConfigParser object to dictionary.

    The resulting dictionary has sections as keys which point to a dict of the
    section options as key => value pairs.

    If there is a string representation of truth, it is converted from str to bool.
    """
    _dict: "Dict[str, Any]" = {}
    for section in config.sections():
        _dict[section] = {}
        for key, _value in config.items(section):
            try:
                _value = strtobool(_value)  # type: ignore
            except ValueError:
                pass
            _dict[section][key] = _value
    return _dict


def load_config(config_file: str) -> configparser.ConfigParser:
    """Load in config from external file"""
    config = configparser.ConfigParser()
    config.read(config_file)
    return config


def verify_reporting_directories(config: Dict) -> None:
    """Check reporting directory exists and create if not"""
    log = logging.getLogger(inspect.stack()[0][3])

    files_path = config.get("GENERAL", {}).get("files_path")
    if files_path and not os.path.isdir(files_path):
        log.debug("creating %s", files_path)
        os.makedirs(files_path)


class Base64Encoder(json.JSONEncoder):
    """A Base64 encoder for JSON"""

    # example usage: json.dumps(bytes(frame), cls=Base64Encoder)

    # pylint: disable=method-hidden
    def default(self, obj):
        """Perform default Base64 encode"""
        if isinstance(obj, bytes):
            return b64encode(obj).decode()
        return json.JSONEncoder.default(self, obj)


def get_bit(byteval, index) -> bool:
    """Retrieve bit value from byte at provided index"""
    return (byteval & (1 << index)) != 0


@dataclass
class Capability:
    """Define custom fields for reporting"""

    name: str = ""
    value: Union[str, int, float] = ""
    db_key: str = ""
    db_value: Union[int, float, str, List[float], None] = 0
