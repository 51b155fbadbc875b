import math

import pytest

from lidarplot.projection import ProjectionConfig, ScanSample


@pytest.fixture
def config():
    return ProjectionConfig()


@pytest.fixture
def half_circle_scan():
    # 100 readings at 1 m over [0, pi]
    return ScanSample(
        angle_min=0.0,
        angle_max=math.pi,
        angle_increment=math.pi / 99,
        range_min=0.1,
        range_max=5.0,
        ranges=[1.0] * 100,
        frame_id='laser',
    )


def make_scan(ranges, angle_min=0.0, angle_increment=math.pi / 2,
              range_min=0.1, range_max=5.0, **kwargs):
    return ScanSample(
        angle_min=angle_min,
        angle_max=angle_min + angle_increment * max(len(ranges) - 1, 0),
        angle_increment=angle_increment,
        range_min=range_min,
        range_max=range_max,
        ranges=list(ranges),
        **kwargs,
    )


@pytest.fixture
def scan_factory():
    return make_scan
