# setup.py
from setuptools import setup, find_packages

setup(
    name="lioliosh",
    version="0.0.1",
    packages=find_packages(include=["lioliosh", "lioliosh.*"]),
    python_requires=">=3.10",
    install_requires=[
        "loguru",
        "prompt_toolkit",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["lioliosh=lioliosh.__main__:main"],
    },
    zip_safe=False,
)
