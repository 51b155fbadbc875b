#!/usr/bin/env python3
import math

from lidarplot.projection import (
    frame_id_of,
    project_scan,
    render_pixels,
    resolve_point_count,
)


class ScanPlotter:
    """
    Scan handler that knows nothing about the middleware.

    Whoever owns the subscription hands it a subscribe(topic, handler)
    callable through attach(); every incoming scan goes through on_scan().
    display needs show(frame), recorder needs is_opened and write(frame),
    logger needs info() and debug().
    """

    def __init__(self, config, display=None, recorder=None, logger=None):
        self.config = config
        self.display = display
        self.recorder = recorder
        self.logger = logger

    def attach(self, subscribe, topic):
        return subscribe(topic, self.on_scan)

    def on_scan(self, scan):
        count = resolve_point_count(scan)
        if self.logger is not None:
            self.logger.info(f"I heard a laser scan {frame_id_of(scan)} [{count}]:")
            self.logger.info(
                f"angle_range : [{math.degrees(scan.angle_min):f}, {math.degrees(scan.angle_max):f}]")

        pixels = project_scan(scan, self.config, self.logger)
        frame = render_pixels(pixels, self.config)
        if self.logger is not None:
            self.logger.debug(f"plotted {len(pixels)} of {count} points")

        if self.display is not None:
            self.display.show(frame)

        if self.recorder is not None and self.recorder.is_opened:
            self.recorder.write(frame)

        return frame

    def close(self):
        if self.recorder is not None:
            self.recorder.release()
        if self.display is not None:
            self.display.close()
