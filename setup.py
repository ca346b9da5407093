# setup.py
from setuptools import setup, find_packages

setup(
    name="wfmesh",
    version="1.0.0",
    description="Wavefront OBJ mesh decoder for render-ready vertex/index buffers",
    packages=find_packages(include=["wfmesh", "wfmesh.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.20.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
)
