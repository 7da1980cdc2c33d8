"""
Setup script for the task-tracker CLI.
"""
from setuptools import setup, find_packages

setup(
    name="task-tracker",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "click>=8.1.0",
        "pydantic>=2.5.0",
        "pydantic-settings>=2.1.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "task-tracker=task_tracker.__main__:main",
        ],
    },
    python_requires=">=3.11",
)
