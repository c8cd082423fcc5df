from setuptools import setup, find_packages

# Core dependencies
core_requirements = [
    "pillow>=9.3.0",
    "typing-extensions>=4.4.0"
]

# Optional test dependencies
test_requirements = [
    "pytest>=7.0.0",
    "defusedxml>=0.7.1"
]

setup(
    name="svg_writer",
    version="1.0.0",
    description="Object model for building vector graphics and writing them as SVG documents",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=core_requirements,
    extras_require={
        "test": test_requirements,
    },
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "svg-writer-demo=svg_writer.main:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Topic :: Multimedia :: Graphics",
    ],
)
