import os

import setuptools

module_dir = os.path.dirname(os.path.abspath(__file__))

setuptools.setup(
    name="mongodel",
    version="0.1.0",
    description="mongodel deletes single MongoDB documents by their ObjectId",
    long_description=open(os.path.join(module_dir, "README.md")).read(),
    long_description_content_type="text/markdown",
    install_requires=[
        "pymongo >= 4.0",
        "fireworks >= 1.9.6",
        "monty >= 4.0.0",
        "python-dotenv >= 0.19.0",
        "ruamel.yaml",
        "dnspython",
    ],
    extras_require={"tests": ["pytest", "mongomock >= 4.1"]},
    packages=setuptools.find_packages(exclude=["tests", "tests.*"]),
    entry_points={
        "console_scripts": ["mongodel-delete = mongodel.cli:main"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Information Technology",
        "Operating System :: OS Independent",
        "Topic :: Database",
    ],
    python_requires=">=3.8",
)
