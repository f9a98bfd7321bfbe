from setuptools import setup, find_packages

setup(
    name="hwsim",
    version="0.1.0",
    description="A cycle-based interpreter and simulator for a small hardware description language",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "examples"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.10",
    install_requires=[
    ],
    extras_require={
        "test": ["pytest"],
    },
)
