from setuptools import setup, find_packages

setup(
    name="index-audit",
    version="0.1",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "pymongo==4.6.1",
        "pydantic==2.5.3",
        "python-dotenv==1.0.0"
    ],
    extras_require={
        "test": ["pytest==7.4.4"],
    },
    entry_points={
        "console_scripts": [
            "index-audit=index_audit.main:main",
        ],
    },
) 
