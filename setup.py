from setuptools import setup, find_packages

setup(
    name="rigidtf",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    description="Vectors, unit quaternions and rigid transforms for composing coordinate frames",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "pyvista",
        "matplotlib",
        "quantities",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
