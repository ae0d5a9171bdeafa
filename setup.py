"""Setup configuration for ibox-discover."""

from setuptools import setup, find_packages

setup(
    name="ibox-discover",
    version="0.1.0",
    description="Discover iBox (ASUS) devices on the local network via UDP broadcast",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.9",
    install_requires=[
        "pyyaml>=6.0",
        "click>=8.1.0",
        "psutil>=5.9.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "ibox-discover=ibox_discover.cli:main",
        ],
    },
)
