from setuptools import setup, find_packages

setup(
    name="printline",
    version="0.1.0",
    description="Configurable console output printer with styles and verbosity",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "rich",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": ["printline=printline.__main__:main"],
    },
    python_requires=">=3.12",
)
