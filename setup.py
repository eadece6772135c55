from setuptools import find_packages, setup
import os

# Version configuration
version = "0.2.0"

# If in CI/CD (GitHub Actions), a release tag overrides the base version
if os.environ.get("GITHUB_ACTIONS") == "true":
    ref = os.environ.get("GITHUB_REF", "")
    if ref.startswith("refs/tags/v"):
        version = ref.split("/")[-1][1:]  # Remove 'v' prefix
        print(f"CI/CD release build using tag version: {version}")
    else:
        git_sha = os.environ.get("GITHUB_SHA", "")
        if git_sha:
            version = f"{version}.dev0+g{git_sha[:7]}"
        print(f"CI/CD build using version: {version}")

setup(
    name="hand",
    version=version,
    description="Styled status lines for command-line tools",
    long_description=open("README.md", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    license="MIT",
    packages=find_packages(include=['hand', 'hand.*']),
    install_requires=[
        "click",
        "typing-extensions",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-cov",
            "pytest-mock",
        ],
        "dev": [
            "black",
            "flake8",
            "flake8-docstrings",
            "isort",
            "mypy",
            "pre-commit",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Environment :: Console",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
    python_requires=">=3.8",
)
