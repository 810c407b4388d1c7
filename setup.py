#!/usr/bin/env python
from __future__ import annotations

import setuptools

if __name__ == "__main__":
    if int(setuptools.__version__.split(".")[0]) < 61:
        print("Please upgrade setuptools to at least version 61.0.0")
        exit(1)

    setuptools.setup(
        name="keysets",
        version="0.1.0",
        description="Dict-backed sets with set algebra and sorted enumeration",
        package_dir={"": "src"},
        packages=setuptools.find_packages("src"),
        package_data={"keysets": ["py.typed"]},
        python_requires=">=3.8",
        install_requires=["typing_extensions>=4.0"],
        extras_require={"test": ["pytest", "hypothesis"]},
    )
