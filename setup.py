# -*- coding: utf-8 -*-
import codecs
from setuptools import find_packages, setup


setup(
    name="webui.automation",
    version="0.1.0",
    description="Page objects and waiting elements for UI test automation with Playwright",
    long_description=codecs.open("README.rst", mode="r", encoding="utf-8").read(),
    long_description_content_type="text/x-rst",
    license="Apache license",
    packages=find_packages("src"),
    package_dir={"": "src"},
    python_requires=">=3.9",
    install_requires=[
        "cached_property",
        "playwright",
        "wait_for",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    classifiers=[
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: Implementation :: CPython",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Topic :: Software Development :: Quality Assurance",
        "Topic :: Software Development :: Testing",
    ],
)
