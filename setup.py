from setuptools import find_packages, setup

with open("README.md", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="pymisrhr",
    version="0.1.0",
    author="Boris Gailleton",
    author_email="boris.gailleton@univ-rennes.fr",
    description="GPU resampling and identifier utilities for MISR-HR processing",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["pymisrhr", "pymisrhr.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Scientific/Engineering :: Atmospheric Science",
        "Topic :: Scientific/Engineering :: GIS",
    ],
    python_requires=">=3.9",
    install_requires=[
        "taichi>=1.4.0",
        "numpy>=1.20.0",
        "click>=7.0,<8.2",
    ],
    extras_require={
        "dev": [
            "pytest>=6.0",
            "pytest-cov",
            "black",
            "flake8",
        ],
    },
    keywords="MISR remote sensing resampling radiance GPU taichi",
    entry_points={
        "console_scripts": [
            "pmh-upsample=pymisrhr.cli.rastermanip_commands:grid_upsample",
            "pmh-downsample=pymisrhr.cli.rastermanip_commands:grid_downsample",
            "pmh-fileinfo=pymisrhr.cli.fileinfo_commands:fileinfo",
        ],
    },
)
