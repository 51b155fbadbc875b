from setuptools import find_packages, setup
from glob import glob
import os

package_name = 'lidarplot'

setup(
    name=package_name,
    version='0.1.0',
    packages=find_packages(exclude=['test']),
    data_files=[
        ('share/ament_index/resource_index/packages',
            ['resource/' + package_name]),
        ('share/' + package_name, ['package.xml']),
        (os.path.join('share', package_name, 'launch'), glob('launch/*.launch.py')),
    ],
    install_requires=[
        'setuptools',
        'numpy',
        'opencv-python',
        'PyYAML',
    ],
    zip_safe=True,
    maintainer='vietle9204',
    maintainer_email='vietle9204@gmail.com',
    description='Top-down OpenCV view of a 2D LaserScan, with optional video recording',
    license='Apache-2.0',
    extras_require={
        'test': [
            'pytest',
        ],
    },
    entry_points={
        'console_scripts': [
            'lidar_plot_node = lidarplot.lidar_plot_node:main',
            'scan_snapshot = lidarplot.scan_snapshot:main',
        ],
    },
)
