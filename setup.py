from setuptools import setup, find_packages

setup(
    name="mcts-engine",
    version="0.1.0",
    description="Arena-backed Monte Carlo Tree Search engine for two-player games",
    author="",
    author_email="",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.24.0",
        "pyyaml>=6.0",
        "chess>=1.10.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
        ],
        "dev": [
            "black>=23.0.0",
            "mypy>=1.5.0",
            "pytest-cov>=4.1.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "mcts-engine=mcts_engine.cli:main",
        ],
    },
)
