"""Build script for capillary.

Pure Python; the trie modules are installed as flat top-level modules.
"""

from setuptools import setup


setup(
    name="capillary",
    version="0.1.0",
    description="Dictionary keyed by sequences of key parts, with partial key lookup",
    py_modules=["capillary", "node_arena", "find_replace"],
    python_requires=">=3.9",
    install_requires=["bitarray"],
    extras_require={"test": ["pytest"]},
)
