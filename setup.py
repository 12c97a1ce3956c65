from setuptools import setup, find_packages

setup(
    name="hanoi-tower",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["hanoi_core", "hanoi_solver", "hanoi_tower", "audit_solver"],
    install_requires=[
        "numpy>=1.21.0",
        "gymnasium>=0.29.0",
        "PyYAML>=6.0",
        "tqdm>=4.64.0",
        "colored>=2.0.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "hanoi-tower=hanoi_tower:main",
            "hanoi-audit=audit_solver:main",
            "hanoi-replay=tools.replay:main",
        ],
    },
    python_requires=">=3.8",
    zip_safe=False,
    include_package_data=True,
    author="Hanoi Tower Team",
    description="Tower of Hanoi puzzle engine, optimal solver, console game and Gymnasium environment",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Topic :: Games/Entertainment :: Puzzle Games",
        "Topic :: Scientific/Engineering :: Artificial Intelligence",
    ],
)
