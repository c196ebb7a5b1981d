# -*- coding: utf-8 -*-
"""
Map Data Type Tests - Type ranges, blank values and integer scaling.

Dependencies
------------
pytest

Author
------
Duane Smalley, PhD
duane.d.smalley@gmail.com

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-19

Modified
--------
2026-10-19
"""

import math
import sys
from pathlib import Path

import numpy as np
import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from orbmap.exceptions import ValidationError
from orbmap.mapping.traits import (
    clip_maximum,
    clip_minimum,
    empty_value,
    float_range,
    resolve_blank,
    scale_and_offset,
    type_range,
)


# ---------------------------------------------------------------------------
# Type ranges
# ---------------------------------------------------------------------------

class TestTypeRange:

    def test_integer(self):
        assert type_range(np.int8) == (-128, 127)
        assert type_range(np.uint16) == (0, 65535)

    def test_float_lowest_is_negative(self):
        lowest, highest = type_range(np.float32)
        assert lowest == -highest
        assert lowest < 0

    def test_rejects_non_numeric(self):
        with pytest.raises(ValidationError, match="integer or floating"):
            type_range(np.complex128)
        with pytest.raises(ValidationError):
            type_range(np.bool_)

    def test_clip(self):
        assert clip_minimum(np.uint8, -5) == 0
        assert clip_minimum(np.uint8, 5) == 5
        assert clip_maximum(np.int8, 300) == 127
        assert clip_maximum(np.float64, math.inf) == np.finfo(np.float64).max

    def test_float_range_small_types(self):
        assert float_range(np.int16) == (-32768.0, 32767.0)
        assert float_range(np.float32) == type_range(np.float32)

    @pytest.mark.parametrize("dtype", [np.int64, np.uint64])
    def test_float_range_64_bit(self, dtype):
        lowest, highest = float_range(dtype)
        info = np.iinfo(dtype)
        assert info.min <= int(lowest)
        assert int(highest) <= info.max
        assert highest < 2.0 ** info.bits
        assert highest == np.nextafter(float(info.max), -math.inf)

    def test_clip_64_bit_fits(self):
        highest = clip_maximum(np.int64, math.inf)
        assert int(highest) <= np.iinfo(np.int64).max
        np.array([highest]).astype(np.int64)


class TestBlank:

    def test_empty_value(self):
        assert math.isnan(empty_value(np.float32))
        assert empty_value(np.int16) == 0

    def test_default_blank(self):
        assert math.isnan(resolve_blank(np.float64))
        assert resolve_blank(np.uint8) == 0

    def test_explicit_blank(self):
        assert resolve_blank(np.int16, -32768) == -32768
        assert resolve_blank(np.float32, -1.0) == -1.0

    def test_integer_out_of_range(self):
        with pytest.raises(ValidationError, match="does not fit"):
            resolve_blank(np.int8, 200)

    def test_float_out_of_range(self):
        with pytest.raises(ValidationError, match="does not fit"):
            resolve_blank(np.float32, 1e39)

    def test_nan_integer(self):
        with pytest.raises(ValidationError, match="NaN"):
            resolve_blank(np.int32, math.nan)

    def test_nan_float(self):
        assert math.isnan(resolve_blank(np.float32, math.nan))

    def test_fractional_integer(self):
        with pytest.raises(ValidationError, match="not an integer"):
            resolve_blank(np.int16, 1.5)

    def test_integral_float_integer(self):
        assert resolve_blank(np.int16, 2.0) == 2.0
        assert resolve_blank(np.uint8, 255.0) == 255.0


# ---------------------------------------------------------------------------
# Scale and offset
# ---------------------------------------------------------------------------

class TestScaleAndOffset:

    def test_float_identity(self):
        assert scale_and_offset(np.float32, -1e6, 1e6) == (1.0, 0.0)

    def test_unsigned_shifted_up(self):
        assert scale_and_offset(np.uint8, -1.0, 1.0) == (100.0, 100.0)

    def test_signed_centered(self):
        assert scale_and_offset(np.int16, -90.0, 90.0) == (100.0, 0.0)

    def test_signed_shifted_down(self):
        assert scale_and_offset(np.int16, 0.0, 360.0) == (100.0, -18000.0)

    def test_small_range(self):
        assert scale_and_offset(np.int16, -1.0, 1.0) == (10000.0, 0.0)

    def test_scale_reduced_to_fit(self):
        assert scale_and_offset(np.int16, 0.0, 9.9) == (1000.0, 0.0)

    def test_zero_range(self):
        assert scale_and_offset(np.int16, 5.0, 5.0) == (1.0, 0.0)

    def test_range_too_wide(self):
        assert scale_and_offset(np.uint8, 0.0, 360.0) is None

    def test_inverted_range(self):
        assert scale_and_offset(np.int16, 5.0, 1.0) is None

    def test_non_finite_range(self):
        assert scale_and_offset(np.int16, 0.0, math.inf) is None

    @pytest.mark.parametrize("dtype,minimum,maximum", [
        (np.uint8, -1.0, 1.0),
        (np.int16, 0.0, 360.0),
        (np.uint16, -90.0, 90.0),
        (np.int32, 1000.0, 1000.5),
    ])
    def test_scaled_data_fits(self, dtype, minimum, maximum):
        scale, offset = scale_and_offset(dtype, minimum, maximum)
        lowest, highest = type_range(dtype)
        assert lowest <= minimum * scale + offset <= highest
        assert lowest <= maximum * scale + offset <= highest
