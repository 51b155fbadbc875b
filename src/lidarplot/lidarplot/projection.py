#!/usr/bin/env python3
"""
Top-down projection of a 2-D laser scan into a BGR image.

Nothing in here touches ROS, so it works the same on a live LaserScan
message, on a ScanSample built by hand, or on a scan loaded from disk.
"""
import math
from dataclasses import dataclass, field

import cv2
import numpy as np


# ===== Defaults =====
IMAGE_SIZE = 500          # px, square image
METER_PER_PIXEL = 0.02    # 2 cm per pixel -> 500 px = 10 m

# BGR
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
RED = (0, 0, 255)


@dataclass(frozen=True)
class ProjectionConfig:
    image_size: int = IMAGE_SIZE
    meter_per_pixel: float = METER_PER_PIXEL
    point_radius: int = 2
    point_color: tuple = RED
    cross_half_length: int = 5
    cross_thickness: int = 2
    cross_color: tuple = BLACK
    background: tuple = WHITE

    def __post_init__(self):
        if self.image_size <= 0:
            raise ValueError(f"image_size must be positive, got {self.image_size}")
        if not self.meter_per_pixel > 0:
            raise ValueError(f"meter_per_pixel must be positive, got {self.meter_per_pixel}")

    @property
    def center(self):
        return (self.image_size // 2, self.image_size // 2)


@dataclass
class ScanSample:
    """
    One sweep of a range sensor, mirroring the LaserScan fields we use.

    ranges[i] was measured at angle_min + i * angle_increment.
    """
    angle_min: float
    angle_max: float
    angle_increment: float
    range_min: float
    range_max: float
    ranges: list = field(default_factory=list)
    scan_time: float = 0.0
    time_increment: float = 0.0
    frame_id: str = ""

    @classmethod
    def from_msg(cls, msg):
        return cls(
            angle_min=msg.angle_min,
            angle_max=msg.angle_max,
            angle_increment=msg.angle_increment,
            range_min=msg.range_min,
            range_max=msg.range_max,
            ranges=list(msg.ranges),
            scan_time=msg.scan_time,
            time_increment=msg.time_increment,
            frame_id=msg.header.frame_id,
        )


def frame_id_of(scan):
    """frame_id of a ScanSample or of a LaserScan (which keeps it in the header)."""
    frame_id = getattr(scan, 'frame_id', None)
    if frame_id is None:
        header = getattr(scan, 'header', None)
        frame_id = getattr(header, 'frame_id', '')
    return frame_id


# ================= COUNT =================

def resolve_point_count(scan):
    """
    Number of readings to plot.

    The driver frames a scan as scan_time / time_increment samples; when that
    is unusable (zero increment, non-positive ratio) fall back to the number
    of readings. Never more than len(ranges).
    """
    n_ranges = len(scan.ranges)
    scan_time = getattr(scan, 'scan_time', 0.0) or 0.0
    time_increment = getattr(scan, 'time_increment', 0.0) or 0.0

    count = 0
    if time_increment != 0.0 and math.isfinite(scan_time) and math.isfinite(time_increment):
        count = int(scan_time / time_increment)
    if count <= 0:
        count = n_ranges

    return min(count, n_ranges)


# ================= PROJECTION =================

def is_valid_range(r, scan):
    if math.isnan(r):
        return False
    return scan.range_min <= r <= scan.range_max


def polar_to_image(r, angle, config):
    """(range, angle) in the sensor frame -> float (u, v) image coordinates."""
    # x forward, y left
    x = r * math.cos(angle)
    y = r * math.sin(angle)

    # rotate 90 deg clockwise: (x, y) -> (y, -x)
    x_rot = y
    y_rot = -x

    cx, cy = config.center
    u = cx + x_rot / config.meter_per_pixel
    v = cy - y_rot / config.meter_per_pixel   # image rows grow downward
    return u, v


def project_point(r, angle, config):
    """Pixel (px, py) for one reading, or None if it lands off the image."""
    u, v = polar_to_image(r, angle, config)
    if not (math.isfinite(u) and math.isfinite(v)):
        return None

    px = math.floor(u)
    py = math.floor(v)
    if 0 <= px < config.image_size and 0 <= py < config.image_size:
        return px, py
    return None


def project_scan(scan, config, logger=None):
    pixels = []
    for i in range(resolve_point_count(scan)):
        angle = scan.angle_min + i * scan.angle_increment
        r = float(scan.ranges[i])
        if logger is not None:
            logger.debug(f"angle-distance : [{math.degrees(angle):f}, {r:f}]")

        if not is_valid_range(r, scan):
            continue

        pixel = project_point(r, angle, config)
        if pixel is not None:
            pixels.append(pixel)
    return pixels


# ================= RENDER =================

def blank_frame(config):
    frame = np.empty((config.image_size, config.image_size, 3), dtype=np.uint8)
    frame[:] = config.background
    return frame


def draw_origin(frame, config):
    cx, cy = config.center
    h = config.cross_half_length
    cv2.line(frame, (cx - h, cy), (cx + h, cy), config.cross_color, config.cross_thickness)
    cv2.line(frame, (cx, cy - h), (cx, cy + h), config.cross_color, config.cross_thickness)


def render_pixels(pixels, config):
    frame = blank_frame(config)
    draw_origin(frame, config)
    for px, py in pixels:
        cv2.circle(frame, (px, py), config.point_radius, config.point_color, -1)
    return frame


def render_scan(scan, config):
    """Fresh frame with the origin cross and one filled disk per valid reading."""
    return render_pixels(project_scan(scan, config), config)
