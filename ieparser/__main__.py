# -*- coding: utf-8 -*-
#
# ieparser : an 802.11 HT/VHT information element decoder
# Copyright : (c) 2021 ieparser contributors
# License : BSD-3-Clause
# Maintainer : ieparser contributors

"""
ieparser
~~~~~~~~

802.11 HT/VHT information element decoder
"""

import os
import platform
import sys


def main():
    """ Set up args and start the ieparser manager """
    from . import helpers, manager

    parser = helpers.setup_parser()
    args = parser.parse_args()

    manager.start(args)


def init():
    """ Handle main init """
    # hard set no support for python < v3.7
    if sys.version_info < (3, 7):
        sys.exit(
            "{0} requires Python version 3.7 or higher...\nyou are trying to run with Python version {1}...\nexiting...".format(
                os.path.basename(__file__), platform.python_version()
            )
        )

    if __name__ == "__main__":
        sys.exit(main())


init()
