from setuptools import setup, find_packages

version = open('VERSION').read().strip()

setup(
    name="desiredcaps",
    version=version,
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=["selenium"],
    extras_require={
        "test": ["pytest"],
    },
    description="Mergeable desired capabilities for Selenium sessions.",
    license="MPL 2.0",
    keywords=["selenium", "capabilities", "testing"],
    classifiers=[
        "Programming Language :: Python :: 3 :: Only",
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Mozilla Public License 2.0 (MPL 2.0)",
        "Operating System :: POSIX",
        "Topic :: Software Development :: Quality Assurance"
    ],
)
