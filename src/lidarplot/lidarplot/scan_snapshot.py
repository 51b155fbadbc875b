#!/usr/bin/env python3
"""
Render a single scan saved with `ros2 topic echo --once /scan > scan.yaml`.

    scan_snapshot scan.yaml -o scan.png
"""
import argparse
import logging
import math
import os

import cv2
import yaml

from lidarplot.projection import (
    IMAGE_SIZE,
    METER_PER_PIXEL,
    ProjectionConfig,
    ScanSample,
    render_scan,
)

logger = logging.getLogger('scan_snapshot')

_SPECIAL_FLOATS = {
    'nan': math.nan, '.nan': math.nan,
    'inf': math.inf, '.inf': math.inf,
    '-inf': -math.inf, '-.inf': -math.inf,
}


def _to_float(value):
    if isinstance(value, str):
        key = value.strip().lower()
        if key in _SPECIAL_FLOATS:
            return _SPECIAL_FLOATS[key]
        return float(key)
    return float(value)


def parse_ranges(raw):
    ranges = []
    for r in raw or []:
        # `ros2 topic echo` elides long arrays with '...'
        if isinstance(r, str) and r.strip() == '...':
            continue
        ranges.append(_to_float(r))
    return ranges


def scan_from_dict(data):
    header = data.get('header') or {}
    return ScanSample(
        angle_min=_to_float(data['angle_min']),
        angle_max=_to_float(data['angle_max']),
        angle_increment=_to_float(data['angle_increment']),
        range_min=_to_float(data['range_min']),
        range_max=_to_float(data['range_max']),
        ranges=parse_ranges(data.get('ranges')),
        scan_time=_to_float(data.get('scan_time', 0.0)),
        time_increment=_to_float(data.get('time_increment', 0.0)),
        frame_id=header.get('frame_id', ''),
    )


def load_scan(yaml_path):
    if not os.path.exists(yaml_path):
        logger.error(f"Scan file not found at: {yaml_path}")
        raise FileNotFoundError(f"Scan file not found: {yaml_path}")

    with open(yaml_path, 'r') as file:
        # echo output may hold several documents separated by '---'
        docs = [d for d in yaml.safe_load_all(file) if d]

    if not docs or not isinstance(docs[0], dict):
        raise ValueError(f"No scan found in {yaml_path}")
    return scan_from_dict(docs[0])


def write_snapshot(yaml_path, out_path, config=None):
    config = config or ProjectionConfig()
    scan = load_scan(yaml_path)
    frame = render_scan(scan, config)

    if not cv2.imwrite(out_path, frame):
        raise RuntimeError(f"Could not write image to {out_path}")

    logger.info(f"Saved {out_path} ({len(scan.ranges)} readings, frame '{scan.frame_id}')")
    return frame


def main(argv=None):
    parser = argparse.ArgumentParser(description='Render one LaserScan YAML dump as a top-down image.')
    parser.add_argument('input', help='YAML file from `ros2 topic echo --once /scan`')
    parser.add_argument('-o', '--output', default='scan.png')
    parser.add_argument('--image-size', type=int, default=IMAGE_SIZE)
    parser.add_argument('--meter-per-pixel', type=float, default=METER_PER_PIXEL)
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format='[%(levelname)s] [%(name)s]: %(message)s')

    config = ProjectionConfig(image_size=args.image_size, meter_per_pixel=args.meter_per_pixel)
    write_snapshot(args.input, args.output, config)


if __name__ == '__main__':
    main()
