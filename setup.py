from setuptools import setup, find_packages

setup(
    name="pawyc",
    version="0.1.0",
    description="Calendar and Julian Date arithmetic after Practical Astronomy With Your Calculator",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "click>=8.0.0",
        "pytz>=2021.1",
        "python-dateutil>=2.8.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "pawyc=pawyc.cli:cli",
        ],
    },
    python_requires=">=3.8",
)
