from launch import LaunchDescription
from launch.actions import DeclareLaunchArgument
from launch.substitutions import LaunchConfiguration
from launch_ros.actions import Node
from launch_ros.parameter_descriptions import ParameterValue


def generate_launch_description():

    return LaunchDescription([
        DeclareLaunchArgument(
            'scan_topic',
            default_value='/scan',
            description='LaserScan topic to plot'
        ),
        DeclareLaunchArgument(
            'record',
            default_value='true',
            description='save frames to video_path'
        ),
        DeclareLaunchArgument(
            'video_path',
            default_value='lidar_scan.avi',
            description='output video file (MJPG)'
        ),

        Node(
            package='lidarplot',
            executable='lidar_plot_node',
            name='lidar_plot',
            output='screen',
            parameters=[{
                'scan_topic': LaunchConfiguration('scan_topic'),
                'record': ParameterValue(LaunchConfiguration('record'), value_type=bool),
                'video_path': LaunchConfiguration('video_path'),
                'image_size': 500,
                'meter_per_pixel': 0.02,
                'video_fps': 10.0,
            }],
        ),
    ])
