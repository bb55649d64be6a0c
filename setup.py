from setuptools import setup, find_packages

setup(
    name="tnt-transit",
    version="0.1.0",
    description="Maxi-taxi, bus and taxi stand matching for event trips in Trinidad & Tobago.",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "requests",
        "pytz",
        "python-dotenv",
    ],
    extras_require={
        "test": ["pytest"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires='>=3.7',
)
