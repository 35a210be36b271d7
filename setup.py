from setuptools import find_packages, setup

setup(
    name="launchwarden",
    version="0.3.0",
    description="LaunchWarden - discover, reconcile and control launchd agents and daemons",
    packages=find_packages(exclude=("tests", "tests.*")),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",  # Configuration and output schemas
        "typer<0.26",  # CLI (0.26+ vendors click; the CLI relies on the real click contexts)
        "click",  # CLI context and exceptions (Typer's foundation)
        "rich",  # Terminal formatting
        "pyyaml",  # YAML output
        "pygments",  # Output highlighting on a terminal
        "watchdog",  # File system monitoring
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
        ],
    },
    entry_points={
        "console_scripts": [
            "lwc=launchwarden.cli:main",
        ],
    },
)
