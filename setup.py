# setup.py
from setuptools import setup, find_packages

setup(
    name="gfxmaths",
    version="0.2.9",
    description="Implementations for the most essential graphics math operations",
    packages=find_packages(include=["gfxmaths", "gfxmaths.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.20.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
)
