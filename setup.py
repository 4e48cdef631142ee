from setuptools import setup, find_packages

setup(
    name="trendsage",
    version="0.1.0",
    description="Carries test-run statistics from one report to the next as a build history trend.",
    packages=find_packages(include=["trendsage", "trendsage.*"]),
    python_requires=">=3.9",
    install_requires=[
        "click>=8.0",
        "pydantic>=2.0",
        "pyyaml",
        "structlog",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "trendsage = trendsage.cli.main:main",
        ],
    },
)
