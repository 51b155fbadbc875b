import numpy as np
import pytest

from lidarplot import sinks
from lidarplot.sinks import DisplaySink, VideoSink, open_video_sink


def frames(n, size=64):
    for i in range(n):
        frame = np.full((size, size, 3), 255, dtype=np.uint8)
        frame[i % size, :, :] = (0, 0, 255)
        yield frame


def test_video_sink_writes_file(tmp_path):
    path = tmp_path / 'scan.avi'
    with VideoSink(str(path), 10.0, (64, 64)) as sink:
        assert sink.is_opened
        for frame in frames(5):
            sink.write(frame)

    assert not sink.is_opened
    assert path.exists()
    assert path.stat().st_size > 0


def test_video_sink_unopenable_path(tmp_path):
    path = tmp_path / 'missing' / 'dir' / 'scan.avi'
    sink = VideoSink(str(path), 10.0, (64, 64))

    assert not sink.is_opened
    # silently not recorded
    sink.write(next(frames(1)))
    sink.release()
    sink.release()
    assert not path.exists()


@pytest.fixture
def fake_highgui(monkeypatch):
    calls = []
    monkeypatch.setattr(sinks.cv2, 'namedWindow', lambda name, flags: calls.append(('namedWindow', name)))
    monkeypatch.setattr(sinks.cv2, 'imshow', lambda name, frame: calls.append(('imshow', name)))
    monkeypatch.setattr(sinks.cv2, 'waitKey', lambda delay: calls.append(('waitKey', delay)) or -1)
    monkeypatch.setattr(sinks.cv2, 'destroyWindow', lambda name: calls.append(('destroyWindow', name)))
    return calls


def test_display_sink_show_and_close(fake_highgui):
    display = DisplaySink('Lidar Scan')
    for frame in frames(2):
        display.show(frame)
    display.close()
    display.close()

    assert fake_highgui == [
        ('namedWindow', 'Lidar Scan'),
        ('imshow', 'Lidar Scan'),
        ('waitKey', 1),
        ('imshow', 'Lidar Scan'),
        ('waitKey', 1),
        ('destroyWindow', 'Lidar Scan'),
    ]


def test_display_sink_close_before_show(fake_highgui):
    DisplaySink().close()
    assert fake_highgui == []


class FakeLogger:
    def __init__(self):
        self.warnings = []

    def warn(self, message):
        self.warnings.append(message)


def test_open_video_sink_warns_once_when_unavailable(tmp_path):
    logger = FakeLogger()
    sink = open_video_sink(str(tmp_path / 'missing' / 'scan.avi'), 10.0, (64, 64), logger)

    assert sink is None
    assert len(logger.warnings) == 1
    assert 'Failed to open video writer' in logger.warnings[0]


def test_open_video_sink_quiet_when_opened(tmp_path):
    logger = FakeLogger()
    sink = open_video_sink(str(tmp_path / 'scan.avi'), 10.0, (64, 64), logger)
    try:
        assert sink is not None and sink.is_opened
        assert logger.warnings == []
    finally:
        if sink is not None:
            sink.release()
