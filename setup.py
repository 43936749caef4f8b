# setup.py
from setuptools import setup, find_packages

setup(
    name="vehicool",
    version="1.0.0",
    description="VehiCool scenario composition and animation engine",
    packages=find_packages(include=["vehicool", "vehicool.*"]),
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.20.0",
        "glfw>=2.5.0",
        "PyOpenGL>=3.1.5",
        "Pillow>=9.1.0",
        "imageio>=2.22.0",
        "imageio-ffmpeg>=0.4.7",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
)
