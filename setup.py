from setuptools import setup, find_packages

setup(
    name="moody_plate",
    version="1.0.0",
    packages=find_packages(exclude=["*.tests"]),
    install_requires=[
        "pandas>=1.3.0",
        "numpy>=1.20.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "moody-plate=moody_plate.cli.main:main",
        ],
    },
    python_requires=">=3.8",
    author="Moody Plate Tools",
    description="Surface plate calibration by Moody's method",
)
