import io
from setuptools import setup, find_packages


def read_file(filename, **kwargs):
    encoding = kwargs.get("encoding", "utf-8")

    with io.open(filename, encoding=encoding) as f:
        return f.read()

with open("ioplace/version.py", "r") as f:
    exec(f.read())

setup(
    name="ioplace",
    version=__version__,
    packages=find_packages(exclude=["tests", "tests.*"]),

    # Metadata for PyPi
    author="The ioplace Authors",
    description="Minimum-cost matching placement of chip I/O pins",
    long_description=read_file("README.rst"),
    license="BSD",
    classifiers=[
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",

        "License :: OSI Approved :: BSD License",

        "Operating System :: POSIX :: Linux",
        "Operating System :: Microsoft :: Windows",
        "Operating System :: MacOS",

        "Programming Language :: Python :: 3",

        "Topic :: Scientific/Engineering :: Electronic Design Automation (EDA)",
    ],
    keywords="eda placement io-pins hungarian assignment",

    # Requirements
    python_requires=">=3.6",
    install_requires=["numpy>1.6", "scipy", "sentinel"],
    extras_require={
        "test": ["pytest", "mock"],
    },
)
