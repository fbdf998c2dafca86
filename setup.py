"""
grantstore: opaque-handle grant persistence for OAuth 2.0 / OpenID Connect servers.

grantstore keeps the short-lived artifacts an authorization server issues
(reference tokens, refresh tokens, authorization codes, consent and device
codes) in one generic store, keyed by a one-way hash of the handle given to
the client.
"""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

with open("requirements.txt", "r", encoding="utf-8") as fh:
    requirements = [line.strip() for line in fh if line.strip() and not line.startswith("#")]

setup(
    name="grantstore",
    version="0.1.0",
    description="Opaque-handle grant persistence for OAuth 2.0 / OpenID Connect servers",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["grantstore", "grantstore.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Security",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
    python_requires=">=3.8",
    install_requires=requirements,
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-asyncio>=0.21.0",
            "pytest-cov>=4.0.0",
            "black>=23.0.0",
            "flake8>=6.0.0",
            "mypy>=1.0.0",
        ],
    },
)
