# -*- coding: utf-8 -*-

from setuptools import find_packages, setup

extras_require = {
    "test": [
        "pytest>=6.2.5",
        "pytest-cov>=2.10",
        "pytest-xdist>=2.5",
        "eth_abi>=4.0.0",
        "hypothesis>=5.37.1",
    ],
    "lint": ["black", "flake8", "flake8-bugbear", "flake8-use-fstring", "isort", "mypy"],
    "dev": ["ipython", "pre-commit", "twine"],
}

extras_require["dev"] = extras_require["test"] + extras_require["lint"] + extras_require["dev"]

with open("README.md", "r") as f:
    long_description = f.read()


setup(
    name="znn-abi",
    version="0.1.0",
    description="ABI codec for calls to Zenon Network embedded contracts",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="znn-abi developers",
    author_email="",
    license="MIT",
    keywords="zenon znn abi embedded contract codec",
    include_package_data=True,
    packages=find_packages(include=["znn_abi", "znn_abi.*"]),
    python_requires=">=3.10,<4",
    install_requires=["pycryptodome>=3.5.1,<4", "bech32>=1.2.0"],
    tests_require=extras_require["test"],
    extras_require=extras_require,
    entry_points={"console_scripts": ["znn-abi=znn_abi.cli.abi_tool:_parse_cli_args"]},
    classifiers=[
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
    package_data={"znn_abi.builtin_contracts": ["*.json"]},
)
