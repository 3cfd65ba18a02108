import numpy as np
import pytest

from foveal_pano import ContractViolationError, OptimizedImage, decode, encode
from conftest import make_coordinate_panorama


def _pasted_surround(opt: OptimizedImage) -> np.ndarray:
    surround = opt.blurred.copy()
    rows, cols = opt.focused.shape[:2]
    surround[opt.focus_row:opt.focus_row + rows, opt.focus_col:opt.focus_col + cols] = opt.focused
    return surround


def _covered_columns(opt: OptimizedImage) -> np.ndarray:
    width = opt.full_width
    covered = np.zeros(width, dtype=bool)
    covered[(opt.left_buffer + np.arange(opt.blurred.shape[1])) % width] = True
    return covered


def test_decode_wrapped_surround(coordinate_panorama):
    opt = encode(coordinate_panorama, 0, 90)
    decoded = decode(opt)
    surround = _pasted_surround(opt)

    assert decoded.shape == coordinate_panorama.shape
    assert decoded.dtype == coordinate_panorama.dtype
    np.testing.assert_array_equal(decoded[:, 270:360], surround[:, :90])
    np.testing.assert_array_equal(decoded[:, 0:90], surround[:, 90:])
    assert not decoded[:, 90:270].any()
    # Foveal rectangle is exact on both sides of column 0.
    np.testing.assert_array_equal(decoded[75:105, 345:360], coordinate_panorama[75:105, 345:360])
    np.testing.assert_array_equal(decoded[75:105, 0:15], coordinate_panorama[75:105, 0:15])


def test_decode_contained_surround(coordinate_panorama):
    opt = encode(coordinate_panorama, 180, 90)
    decoded = decode(opt)

    np.testing.assert_array_equal(decoded[:, 90:270], _pasted_surround(opt))
    assert not decoded[:, :90].any()
    assert not decoded[:, 270:].any()
    np.testing.assert_array_equal(decoded[75:105, 165:195], coordinate_panorama[75:105, 165:195])


def test_decode_surround_ending_on_last_column(coordinate_panorama):
    opt = encode(coordinate_panorama, 270, 90)
    assert opt.left_buffer == 180
    decoded = decode(opt)

    np.testing.assert_array_equal(decoded[:, 180:], _pasted_surround(opt))
    assert not decoded[:, :180].any()


def test_decode_does_not_alias_layers(noisy_panorama):
    opt = encode(noisy_panorama, 42, 100)
    blurred_before = opt.blurred.copy()
    decoded = decode(opt)
    assert decoded.flags.writeable
    assert not np.shares_memory(decoded, opt.blurred)
    np.testing.assert_array_equal(opt.blurred, blurred_before)


def test_round_trip_properties_over_many_gazes(noisy_panorama):
    height, width = noisy_panorama.shape[:2]
    for h_angle in range(-180, 541, 23):
        for v_angle in [-20, 0, 33.3, 90, 151, 180, 222]:
            opt = encode(noisy_panorama, h_angle, v_angle)
            decoded = decode(opt)
            assert decoded.shape == noisy_panorama.shape

            covered = _covered_columns(opt)
            assert not decoded[:, ~covered].any()

            rows, cols = opt.focused.shape[:2]
            tile_cols = (opt.left_buffer + opt.focus_col + np.arange(cols)) % width
            tile_rows = slice(opt.focus_row, opt.focus_row + rows)
            np.testing.assert_array_equal(
                decoded[tile_rows][:, tile_cols], noisy_panorama[tile_rows][:, tile_cols]
            )


def test_round_trip_preserves_dimensions_for_various_sizes():
    for width, height in [(360, 180), (720, 360), (200, 100), (203, 101), (1024, 512)]:
        panorama = make_coordinate_panorama(width, height)
        for h_angle in [0, 91.5, 180, 271, 359.9]:
            decoded = decode(encode(panorama, h_angle, 45))
            assert decoded.shape == panorama.shape


def test_round_trip_matches_smooth_source_within_resampling_error():
    rows = np.linspace(0, 179, 180, dtype=np.float64)
    panorama = np.repeat(rows[:, None], 360, axis=1).astype(np.uint16)
    panorama = np.dstack([panorama, panorama, panorama])
    for h_angle in [0, 123, 300]:
        opt = encode(panorama, h_angle, 60)
        decoded = decode(opt).astype(np.int32)
        covered = _covered_columns(opt)
        diff = np.abs(decoded[:, covered] - panorama[:, covered].astype(np.int32))
        assert diff.max() <= 3


def test_decode_constant_panorama_is_exact():
    panorama = np.full((180, 360, 3), 77, dtype=np.uint8)
    opt = encode(panorama, 10, 90)
    decoded = decode(opt)
    covered = _covered_columns(opt)
    assert np.all(decoded[:, covered] == 77)
    assert not decoded[:, ~covered].any()


def _optimized(**overrides) -> OptimizedImage:
    fields = dict(
        focused=np.zeros((10, 10, 3), dtype=np.uint8),
        blurred=np.zeros((60, 50, 3), dtype=np.uint8),
        focus_row=5,
        focus_col=5,
        full_size=(120, 60),
        left_buffer=100,
    )
    fields.update(overrides)
    return OptimizedImage(**fields)


def test_decode_hand_built_record():
    opt = _optimized(focused=np.full((10, 10, 3), 255, dtype=np.uint8))
    decoded = decode(opt)
    assert decoded.shape == (60, 120, 3)
    # Columns [100, 120) then [0, 30) are the surround; the tile sits at 105..115.
    assert np.all(decoded[5:15, 105:115] == 255)
    assert decoded[:, 30:100].sum() == 0


@pytest.mark.parametrize(
    "overrides",
    [
        {"focus_row": 55},
        {"focus_col": -1},
        {"focus_col": 45},
        {"left_buffer": 120},
        {"left_buffer": -3},
        {"focused": np.zeros((10, 10, 3), dtype=np.uint16)},
        {"focused": np.zeros((10, 10), dtype=np.uint8)},
        {"blurred": np.zeros((60, 130, 3), dtype=np.uint8)},
        {"blurred": np.zeros((40, 50, 3), dtype=np.uint8)},
        {"full_size": (0, 60)},
    ],
)
def test_decode_rejects_inconsistent_metadata(overrides):
    with pytest.raises(ContractViolationError):
        decode(_optimized(**overrides))


def test_decode_surround_as_wide_as_panorama():
    blurred = np.tile(np.arange(120, dtype=np.uint8)[None, :, None], (60, 1, 3))
    opt = _optimized(
        focused=np.full((10, 10, 3), 255, dtype=np.uint8),
        blurred=blurred,
        left_buffer=40,
    )
    opt.validate()
    decoded = decode(opt)

    assert decoded.shape == (60, 120, 3)
    # Surround column c lands on panorama column (40 + c) % 120, with no black gap.
    np.testing.assert_array_equal(decoded[20:, 40:, 0], np.tile(np.arange(80), (40, 1)))
    np.testing.assert_array_equal(decoded[20:, :40, 0], np.tile(np.arange(80, 120), (40, 1)))
    assert np.all(decoded[5:15, 45:55] == 255)


def test_optimized_image_leaves_caller_arrays_writable():
    focused = np.zeros((10, 10, 3), dtype=np.uint8)
    blurred = np.zeros((60, 50, 3), dtype=np.uint8)
    opt = _optimized(focused=focused, blurred=blurred)

    assert focused.flags.writeable
    assert blurred.flags.writeable
    assert not opt.focused.flags.writeable
    assert not opt.blurred.flags.writeable
    blurred[0, 0] = 9
    with pytest.raises(ValueError):
        opt.blurred[0, 0] = 0
