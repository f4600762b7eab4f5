# -*- coding: utf-8 -*-

import itertools

import pytest
from ieparser import mcs

FLAGS = list(itertools.product([False, True], repeat=3))


class TestMcs:
    @pytest.mark.parametrize(
        "index,expected",
        [(0, (1, 0)), (7, (1, 7)), (8, (2, 0)), (17, (3, 1)), (31, (4, 7)), (32, (0, 0))],
    )
    def test_mcs_streams(self, index, expected):
        assert mcs.mcs_streams(index) == expected

    def test_mcs_streams_negative(self):
        with pytest.raises(ValueError):
            mcs.mcs_streams(-1)

    @pytest.mark.parametrize(
        "index,sgi20,sgi40,is40,expected",
        [
            (0, False, False, False, 6.0),
            (0, True, False, False, 7.0),
            (0, False, False, True, 13.0),
            (0, False, True, True, 15.0),
            (7, False, False, False, 65.0),
            (7, True, True, False, 72.0),
            (8, False, False, False, 12.0),
            (15, False, False, False, 130.0),
            (15, False, True, True, 300.0),
            (21, True, False, False, 174.0),
            (31, False, True, True, 600.0),
            (31, False, False, True, 540.0),
            # short GI flag for the other width is ignored
            (3, False, True, False, 26.0),
            (3, True, False, True, 54.0),
        ],
    )
    def test_get_speed(self, index, sgi20, sgi40, is40, expected):
        assert mcs.get_speed(index, sgi20, sgi40, is40) == expected

    @pytest.mark.parametrize("index", [32, 33, 76, 255])
    @pytest.mark.parametrize("sgi20,sgi40,is40", FLAGS)
    def test_get_speed_no_rate(self, index, sgi20, sgi40, is40):
        assert mcs.get_speed(index, sgi20, sgi40, is40) == 0

    @pytest.mark.parametrize("sgi20,sgi40,is40", FLAGS)
    def test_get_speed_grows_with_streams(self, sgi20, sgi40, is40):
        for sub_index in range(8):
            speeds = [
                mcs.get_speed(band * 8 + sub_index, sgi20, sgi40, is40)
                for band in range(4)
            ]
            assert speeds == sorted(speeds)
            assert speeds[3] == speeds[0] * 4

    def test_tables_are_immutable(self):
        for table in (mcs.LGI_20MHZ, mcs.SGI_20MHZ, mcs.LGI_40MHZ, mcs.SGI_40MHZ):
            assert isinstance(table, tuple)
            assert len(table) == 8
