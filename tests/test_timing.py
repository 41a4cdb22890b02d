import pytest

from yolopost.timing import span_ms, span_us, time_point_now


def test_time_points_are_monotonic():
    first = time_point_now()
    second = time_point_now()
    assert second >= first


def test_span_of_same_point_is_zero():
    point = time_point_now()
    assert span_us(point, point) == 0
    assert span_ms(point, point) == 0


def test_span_ms_of_two_million_nanoseconds():
    assert span_ms(0, 2_000_000) == 2.0


def test_span_us_of_three_thousand_nanoseconds():
    assert span_us(0, 3_000) == 3.0


@pytest.mark.parametrize("start,end", [(0, 1), (10, 123_456_789), (500, 100)])
def test_ms_and_us_agree(start, end):
    assert span_ms(start, end) * 1000 == pytest.approx(span_us(start, end))


def test_reversed_span_is_negative():
    assert span_us(100, 0) == -span_us(0, 100)