from setuptools import setup, find_packages

setup(
    name="weatherunion",
    version="0.1.0",
    package_dir={"": "src"},
    packages=find_packages("src"),
    install_requires=["httpx"],
    extras_require={
        "scripts": ["python-dotenv"],
        "test": ["pytest", "python-dotenv"],
    },
    python_requires=">=3.9",
    description="Async client for the WeatherUnion live weather API.",
    author="chriscoveyduck",
    author_email="",
    include_package_data=True,
)
