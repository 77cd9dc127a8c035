from setuptools import setup, find_packages

setup(
    name="srt-to-edl",
    version="0.1.0",
    description="Convert SRT subtitles into EDL marker lists for DaVinci Resolve",
    author="Valerio Galano",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "pyyaml>=6.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "srt-to-edl=srt_to_edl.cli:main",
        ],
    },
)
