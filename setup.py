"""Setup."""

import os.path

from setuptools import setup

here = os.path.abspath(os.path.dirname(__file__))
with open(os.path.join(here, "README.rst"), encoding="utf-8") as f:
    LONG_DESCRIPTION = f.read()


PACKAGES = ("async_wemo_client",)


INSTALL_REQUIRES = [
    "voluptuous >= 0.12.1",
    "aiohttp >= 3.7.4",
    "async-timeout >=3.0, <5.0",
    "defusedxml >= 0.6.0",
]


TEST_REQUIRES = [
    "pytest >= 7.0",
    "pytest-asyncio >= 0.21",
    "pytest-cov >= 4.0",
    "coverage >= 6.0",
]


setup(
    name="async_wemo_client",
    version="0.1.0",
    description="Async Belkin Wemo switch client",
    long_description=LONG_DESCRIPTION,
    license="http://www.apache.org/licenses/LICENSE-2.0",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    packages=PACKAGES,
    package_data={
        "async_wemo_client": ["py.typed"],
    },
    python_requires=">=3.8",
    install_requires=INSTALL_REQUIRES,
    tests_require=TEST_REQUIRES,
    extras_require={"test": TEST_REQUIRES},
    entry_points={"console_scripts": ["wemo-toggle=async_wemo_client.cli:main"]},
)
