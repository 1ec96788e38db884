"""
Setup script for lca-offline
"""

from setuptools import setup

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="lca-offline",
    version="1.0.0",
    author="lca-offline developers",
    description="Static CSR graphs, rooted disjoint sets and Tarjan's offline LCA",
    long_description=long_description,
    long_description_content_type="text/markdown",
    py_modules=[
        "config",
        "dfs",
        "disjoint_set",
        "errors",
        "lca_offline",
        "mergesort",
        "pipeline",
        "rooted_tree",
        "static_graph",
        "union_find",
    ],
    entry_points={
        "console_scripts": [
            "lca-offline=pipeline:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Topic :: Scientific/Engineering :: Mathematics",
    ],
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.24.0",
        "pyyaml>=6.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "black>=22.0.0",
            "flake8>=4.0.0",
        ],
    },
)
