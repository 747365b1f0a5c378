import numpy as np
import pytest

from wavefront.errors import RasterFormatError
from wavefront.io import encode_pnm, parse_pnm, read_pnm, write_pnm


def test_parse_binary_graymap_with_comment():
    data = b"P5\n# hospital wing\n3 2\n255\n" + bytes([255, 0, 255, 10, 255, 255])
    raster = parse_pnm(data)
    assert raster.magic == "P5"
    assert (raster.width, raster.height, raster.maxval) == (3, 2, 255)
    assert raster.pixels.tolist() == [[255, 0, 255], [10, 255, 255]]


def test_binary_payload_may_contain_whitespace_bytes():
    payload = bytes([32, 10, 255, 13])
    raster = parse_pnm(b"P5 2 2 255\n" + payload)
    assert raster.pixels.flatten().tolist() == [32, 10, 255, 13]


def test_parse_plain_graymap():
    raster = parse_pnm(b"P2\n2 2\n255\n255 0\n0 255\n")
    assert raster.magic == "P2"
    assert raster.pixels.tolist() == [[255, 0], [0, 255]]


def test_binary_sample_above_maxval_is_rejected():
    with pytest.raises(RasterFormatError):
        parse_pnm(b"P5\n2 1\n15\n" + bytes([200, 255]))


def test_plain_sample_above_maxval_is_rejected():
    with pytest.raises(RasterFormatError):
        parse_pnm(b"P2\n2 1\n15\n200 15\n")


def test_low_maxval_is_rescaled_to_full_range():
    raster = parse_pnm(b"P5\n3 1\n15\n" + bytes([15, 0, 15]))
    assert raster.maxval == 15
    assert raster.pixels.tolist() == [[255, 0, 255]]


@pytest.mark.parametrize(
    "data",
    [
        b"",
        b"P6\n1 1\n255\n\x00\x00\x00",
        b"P5\n2 2\n",
        b"P5\n0 2\n255\n",
        b"P5\n2 -1\n255\n\x00\x00",
        b"P5\n2 2\n65535\n" + bytes(8),
        b"P5\n2 2\n255\n\x00\x00\x00",
        b"P2\n2 2\n255\n1 2 3\n",
    ],
)
def test_malformed_rasters_are_rejected(data):
    with pytest.raises(RasterFormatError):
        parse_pnm(data)


def test_write_then_read(tmp_path):
    pixels = np.array([[0, 50, 255], [200, 255, 1]], dtype=np.uint8)
    path = write_pnm(tmp_path / "out" / "gradient.pnm", pixels)
    assert path.read_bytes().startswith(b"P5\n3 2\n255\n")
    raster = read_pnm(path)
    assert (raster.pixels == pixels).all()


def test_encode_rejects_non_2d_arrays():
    with pytest.raises(ValueError):
        encode_pnm(np.zeros((2, 2, 3), dtype=np.uint8))
