# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="aoc2022",
    version="0.1.0",
    description="Solvers for the twelve first days of the 2022 programming puzzle series",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["aoc2022*"]),
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'aoc2022=aoc2022.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
