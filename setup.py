"""
Setup script for CueCanvas
"""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

with open("requirements.txt", "r", encoding="utf-8") as fh:
    requirements = [line.strip() for line in fh if line.strip() and not line.startswith("#")]

setup(
    name="cuecanvas",
    version="0.1.0",
    author="CueCanvas Team",
    description="2D scene graph and viewport rendering for a cue-sports aiming visualizer",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["cuecanvas", "cuecanvas.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Topic :: Multimedia :: Graphics",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.10",
    install_requires=requirements,
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "cuecanvas=cuecanvas.main:main",
        ],
    },
)
