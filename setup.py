from setuptools import find_packages
from setuptools import setup

setup(
    name="daptest",
    version="0.1.0",
    description="Synchronous Debug Adapter Protocol client for testing DAP servers",
    author="Joel Squire",
    author_email="joel@squire.org",
    packages=find_packages(exclude=("tests", "tests.*")),
    install_requires=[],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=3.0.0",
            "typing_extensions>=4.0.0",
            "black>=22.0.0",
            "isort>=5.10.0",
            "mypy>=0.940",
        ],
    },
    python_requires=">=3.9",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Topic :: Software Development :: Testing",
    ],
)
