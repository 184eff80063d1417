import numpy as np

from asciiart.ramp import RAMP, glyph_index, glyph_rows, quantize


def test_ramp_is_the_eleven_glyph_reference():
    assert RAMP == "@#S%?*+;:,."
    assert len(RAMP) == 11


def test_endpoints_map_to_first_and_last_glyph():
    assert glyph_index(0) == 0
    assert glyph_index(255) == len(RAMP) - 1


def test_index_is_non_decreasing():
    indices = [glyph_index(p) for p in range(256)]
    assert indices == sorted(indices)
    assert set(indices) == set(range(len(RAMP)))


def test_bucket_boundaries():
    # floor(p / 255 * 10): 25 is still bucket 0, 26 is bucket 1
    assert glyph_index(25) == 0
    assert glyph_index(26) == 1
    assert glyph_index(51) == 2
    assert glyph_index(254) == 9


def test_quantize_matches_scalar():
    samples = np.arange(256, dtype=np.uint8).reshape(16, 16)
    expected = np.array([[glyph_index(int(p)) for p in row] for row in samples])
    np.testing.assert_array_equal(quantize(samples), expected)


def test_quantize_does_not_overflow_uint8():
    samples = np.full((1, 3), 255, dtype=np.uint8)
    np.testing.assert_array_equal(quantize(samples), [[10, 10, 10]])


def test_glyph_rows():
    samples = np.array([[0, 255], [128, 0]], dtype=np.uint8)
    assert glyph_rows(samples) == ["@.", "*@"]


def test_glyph_rows_custom_ramp():
    samples = np.array([[0, 127, 128, 255]], dtype=np.uint8)
    assert glyph_rows(samples, ramp="# ") == ["### "]
