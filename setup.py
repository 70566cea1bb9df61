from setuptools import setup, find_packages

setup(
    name="wavrecorder",
    version="0.1.0",
    description="Record a fixed duration of 16-bit PCM audio into a WAV file",
    author="",
    python_requires=">=3.8",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "pyaudio>=0.2.11",
        "numpy>=1.21.0",
        "pyyaml>=6.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "wavrecorder=wavrecorder.main:main",
        ],
    },
)
