# setup.py
from setuptools import setup, find_packages

setup(
    name="prefixlog",
    version="0.1.0",
    description="Named loggers with per-logger level filtering and templated message prefixes",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
