from setuptools import find_packages, setup


setup(
    name="shapes-lab",
    version="0.1.0",
    description="Shape class hierarchy practice: rectangle, square and circle area/perimeter.",
    package_dir={"": "src"},
    packages=find_packages("src"),
    include_package_data=True,
    install_requires=[],
    extras_require={
        "test": ["pytest"],
        "docs": ["sphinx", "sphinx_rtd_theme"],
    },
    python_requires=">=3.10",
)
