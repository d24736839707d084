# setup.py
from setuptools import setup, find_packages

setup(
    name="rscheme",
    version="0.1.0",
    description="A minimal interpreter for a Scheme-like language",
    packages=find_packages(include=["rscheme", "rscheme.*", "rscheme_lsp", "rscheme_lsp.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pygls>=1.1,<2",
        "lsprotocol>=2023.0.0",
    ],
    extras_require={
        "test": ["pytest>=7", "hypothesis>=6"],
    },
    entry_points={
        "console_scripts": [
            "rscheme=rscheme.repl:main",
            "rscheme-ls=rscheme_lsp.server:main",
        ],
    },
    zip_safe=False,
)
