from setuptools import setup, find_packages
setup(
    name="reba",
    version="0.1.0",
    packages=find_packages("src"),
    package_dir={"": "src"},
    include_package_data=True,
    python_requires=">=3.9",
    install_requires=[
        "fastapi>=0.110",
        "pydantic>=2.0",
        "httpx>=0.24",
        "flask>=2.2",
        "uvicorn>=0.23",
        "python-dotenv>=1.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        'console_scripts': [
            'reba=reba.__main__:main'
        ]
    }
)
