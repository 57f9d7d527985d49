"""Setup script for the controller_helper package."""

from setuptools import find_packages, setup

with open("README.md", "r") as f:
    long_description = f.read()

setup(
    name="controller-helper",
    version="0.1.0",
    description="Controller extension helpers for FastAPI MVC applications: JSON envelopes, controller registry and action detection.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["controller_helper", "controller_helper.*"]),
    include_package_data=True,
    install_requires=[
        "pydantic>=2.0",
        "fastapi",
        "typing-extensions>=4.2",  # get_overloads for ambiguous matches
    ],
    extras_require={
        "dev": [
            "pytest>=7.0",
            "httpx>=0.24.0",
            "pre-commit>=3.0.0",
            "black",  # Code formatter
            "isort",  # Import sorting
            "flake8",  # Linting
            "mypy",  # Type checking
            "pytest-cov",  # Coverage reporting
        ],
        "test": [
            "pytest>=7.0",
            "httpx>=0.24.0",
            "pytest-cov",  # Coverage reporting
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.11",
)
