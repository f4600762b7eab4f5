# -*- coding: utf-8 -*-
#
# ieparser : an 802.11 HT/VHT information element decoder
# Copyright : (c) 2021 ieparser contributors
# License : BSD-3-Clause
# Maintainer : ieparser contributors

""" version information for ieparser """

__title__ = "ieparser"
__description__ = "an 802.11 HT/VHT information element decoder"
__url__ = ""
__author__ = "ieparser contributors"
__author_email__ = ""
__version__ = "0.1.0"
__status__ = "alpha"
__license__ = "BSD-3-Clause"
