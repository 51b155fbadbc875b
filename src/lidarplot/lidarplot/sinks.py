#!/usr/bin/env python3
import cv2


class DisplaySink:
    """OpenCV window that shows one frame per scan without blocking."""

    def __init__(self, window_name='Lidar Scan'):
        self.window_name = window_name
        self._created = False

    def show(self, frame):
        if not self._created:
            cv2.namedWindow(self.window_name, cv2.WINDOW_AUTOSIZE)
            self._created = True
        cv2.imshow(self.window_name, frame)
        cv2.waitKey(1)

    def close(self):
        if self._created:
            cv2.destroyWindow(self.window_name)
            self._created = False


class VideoSink:
    """
    Fixed-size, fixed-rate video file, opened once.

    If the writer can not be opened, is_opened stays False and write() does
    nothing; the owner decides whether to report it.
    """

    def __init__(self, path, fps, frame_size, fourcc='MJPG'):
        self.path = path
        self.fps = fps
        self.frame_size = frame_size   # (width, height)
        self._writer = cv2.VideoWriter(
            path,
            cv2.VideoWriter_fourcc(*fourcc),
            fps,
            frame_size,
        )

    @property
    def is_opened(self):
        return self._writer is not None and self._writer.isOpened()

    def write(self, frame):
        if not self.is_opened:
            return
        self._writer.write(frame)

    def release(self):
        if self._writer is None:
            return
        self._writer.release()
        self._writer = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.release()
        return False


def open_video_sink(path, fps, frame_size, logger):
    """VideoSink, or None after a single warning when the writer can not be opened."""
    sink = VideoSink(path, fps, frame_size)
    if not sink.is_opened:
        logger.warn("Failed to open video writer, video will not be saved.")
        sink.release()
        return None
    return sink
