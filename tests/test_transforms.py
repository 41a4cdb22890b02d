import numpy as np
import pytest

from yolopost.transforms import boxes_to_yolo_str, preprocess_image, resize_nearest


def _random_image(h, w, seed=0):
    rng = np.random.default_rng(seed)
    return rng.integers(0, 256, size=(h, w, 3), dtype=np.uint8)


def test_resize_same_size_is_identity():
    image = _random_image(7, 5)
    assert np.array_equal(resize_nearest(image, 7, 5), image)


def test_resize_doubles_each_pixel():
    image = _random_image(2, 3)
    out = resize_nearest(image, 4, 6)
    assert out.shape == (4, 6, 3)
    for y in range(4):
        for x in range(6):
            assert np.array_equal(out[y, x], image[y // 2, x // 2])


def test_resize_downscale_picks_source_pixels():
    image = _random_image(8, 8, seed=3)
    out = resize_nearest(image, 4, 4)
    assert np.array_equal(out, image[::2, ::2])


def test_resize_rejects_wrong_channels():
    with pytest.raises(ValueError):
        resize_nearest(np.zeros((4, 4), dtype=np.uint8), 2, 2)


def test_resize_rejects_non_positive_size():
    with pytest.raises(ValueError):
        resize_nearest(_random_image(4, 4), 0, 2)


def test_preprocess_length_and_range():
    data = preprocess_image(_random_image(10, 12), (6, 8))
    assert data.shape == (3 * 6 * 8,)
    assert data.dtype == np.float32
    assert data.min() >= 0.0
    assert data.max() <= 1.0


def test_preprocess_reorders_bgr_to_rgb_planes():
    image = np.zeros((4, 4, 3), dtype=np.uint8)
    image[..., 0] = 255  # blue
    data = preprocess_image(image, (2, 2))
    expected = np.concatenate(
        [np.zeros(4), np.zeros(4), np.ones(4)]
    ).astype(np.float32)
    assert data.shape == expected.shape
    assert np.array_equal(data, expected)


def test_preprocess_matches_resize():
    image = _random_image(9, 9, seed=5)
    data = preprocess_image(image, (3, 3)).reshape(3, 3, 3)
    resized = resize_nearest(image, 3, 3)
    assert np.allclose(data[0] * 255, resized[..., 2])
    assert np.allclose(data[1] * 255, resized[..., 1])


def test_preprocess_empty_image_raises():
    with pytest.raises(ValueError, match="empty"):
        preprocess_image(np.zeros((0, 0, 3), dtype=np.uint8), (2, 2))


def test_preprocess_wrong_dtype_raises():
    with pytest.raises(ValueError, match="8-bit"):
        preprocess_image(np.zeros((4, 4, 3), dtype=np.float32), (2, 2))


def test_yolo_str_unit_box():
    text = boxes_to_yolo_str([(0.0, 0.0, 1.0, 1.0, 0.9, 0.0)])
    assert text == "0 0.5000000 0.5000000 1.0000000 1.0000000\n"


def test_yolo_str_one_line_per_box_and_class_prefix():
    boxes = [(0.1, 0.2, 0.3, 0.4, 0.5, 2.0), (0.0, 0.0, 0.5, 0.5, 0.7, 1.0)]
    lines = boxes_to_yolo_str(boxes).splitlines()
    assert len(lines) == 2
    assert lines[0].startswith("2 ")
    assert lines[1].startswith("1 ")


def test_yolo_str_empty():
    assert boxes_to_yolo_str([]) == ""