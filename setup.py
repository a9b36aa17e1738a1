from setuptools import setup, find_packages

setup(
    name="pico_pll",
    version="0.1",
    description="PLL configuration calculator for the RP2040",
    packages=find_packages(),
    python_requires=">=3.7",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
