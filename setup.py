# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="sizetree",
    version="1.0.0",
    description="Recursive directory size profiler that saves the size tree as YAML or JSON",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["sizetree", "sizetree.*"]),
    python_requires=">=3.9",
    install_requires=[
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        'console_scripts': [
            'sizetree=sizetree.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
