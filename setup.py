import pathlib

from setuptools import find_packages, setup

# Basic metadata
ROOT = pathlib.Path(__file__).parent
VERSION = "0.1.0"

INSTALL_REQUIRES = [
    "certifi",
    "httpx>=0.27",
    "pydantic>=2.5",
    "pydantic-settings>=2.1",
    "python-dotenv>=1.0",
    "rich>=13.0",
    "typer>=0.12",
]

TEST_REQUIRES = [
    "pytest>=7.4",
    "respx>=0.21",
]

setup(
    name="carerix-webhooks",
    version=VERSION,
    description="Command-line client for managing Carerix application webhooks.",
    python_requires=">=3.9",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=INSTALL_REQUIRES,
    extras_require={"test": TEST_REQUIRES},
    entry_points={
        "console_scripts": [
            # Single-command Typer app; all tokens are parsed by carerix_webhooks.cli.args
            "cx-webhooks=carerix_webhooks.cli.main:app",
        ],
    },
)
