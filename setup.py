"""
CBOWLoader — Setup Script
==========================
Installs CBOWLoader as a local editable package so that all internal
imports (e.g. `from cbowloader.data.loader import CBOWLoader`) work
seamlessly from any script or notebook.

Usage:
    cd /path/to/cbowloader
    pip install -e .
"""

from setuptools import setup, find_packages

setup(
    name="cbowloader",
    version="0.1.0",
    description=(
        "CBOWLoader: in-memory corpus sampler serving context-window "
        "training pairs for CBOW word embeddings"
    ),
    long_description=open("README.md", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    packages=find_packages(include=["cbowloader", "cbowloader.*"]),
    python_requires=">=3.10",
    install_requires=[
        "torch>=2.1.0",
        "numpy>=1.24.0",
        "tqdm>=4.65.0",
        "pyyaml>=6.0",
    ],
    extras_require={
        "dev": ["pytest>=7.0"],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python :: 3",
        "Topic :: Scientific/Engineering :: Artificial Intelligence",
    ],
)
