#!/usr/bin/env python3
import cv2
import rclpy
from rclpy.node import Node
from rclpy.qos import qos_profile_sensor_data

from sensor_msgs.msg import LaserScan

from lidarplot.projection import ProjectionConfig, ScanSample
from lidarplot.scan_plotter import ScanPlotter
from lidarplot.sinks import DisplaySink, open_video_sink


class LidarPlotNode(Node):
    def __init__(self, **kwargs):
        super().__init__('lidar_plot', **kwargs)
        # Declare parameters
        self.declare_param()

        # load parameter
        self.load_parameters()

        config = ProjectionConfig(
            image_size=self.image_size,
            meter_per_pixel=self.meter_per_pixel,
        )

        display = DisplaySink(self.window_name) if self.show_window else None

        recorder = None
        if self.record:
            recorder = open_video_sink(
                self.video_path,
                self.video_fps,
                (config.image_size, config.image_size),
                self.get_logger(),
            )

        self.plotter = ScanPlotter(config, display=display, recorder=recorder,
                                   logger=self.get_logger())

        # subscriber
        self.sub = self.plotter.attach(self.subscribe_scan, self.scan_topic)

        self.get_logger().info(
            f"Lidar plot node started: topic={self.scan_topic}, "
            f"size={config.image_size}px, {config.meter_per_pixel} m/px, "
            f"recording={'on' if recorder is not None else 'off'}")

    def declare_param(self):
        self.declare_parameter('scan_topic', '/scan')

        # image
        self.declare_parameter('image_size', 500)
        self.declare_parameter('meter_per_pixel', 0.02)

        # outputs
        self.declare_parameter('window_name', 'Lidar Scan')
        self.declare_parameter('show_window', True)
        self.declare_parameter('record', True)
        self.declare_parameter('video_path', 'lidar_scan.avi')
        self.declare_parameter('video_fps', 10.0)

    def load_parameters(self):
        self.scan_topic = self.get_parameter('scan_topic').value

        self.image_size = int(self.get_parameter('image_size').value)
        self.meter_per_pixel = float(self.get_parameter('meter_per_pixel').value)

        self.window_name = self.get_parameter('window_name').value
        self.show_window = self.get_parameter('show_window').value
        self.record = self.get_parameter('record').value
        self.video_path = self.get_parameter('video_path').value
        self.video_fps = float(self.get_parameter('video_fps').value)

    def subscribe_scan(self, topic, handler):
        return self.create_subscription(
            LaserScan, topic,
            lambda msg: handler(ScanSample.from_msg(msg)),
            qos_profile_sensor_data)

    def destroy_node(self):
        self.plotter.close()
        return super().destroy_node()


def main(args=None):
    rclpy.init(args=args)
    node = LidarPlotNode()

    try:
        rclpy.spin(node)
    except KeyboardInterrupt:
        pass
    finally:
        node.destroy_node()
        if rclpy.ok():
            rclpy.shutdown()
        cv2.destroyAllWindows()


if __name__ == '__main__':
    main()
