from setuptools import setup, find_packages


setup(
    name="commcid",
    version="0.1",
    packages=find_packages(include=["commcid", "commcid.*"]),
    description="Conversion between Filecoin commitment digests and content identifiers (CIDs).",
    author="vercingetorx",
    python_requires=">=3.8",
    install_requires=[
        "libipld>=1.2",
        "py-multihash>=2.0.1",
        "varint>=1.0.2",
    ],
)
