from setuptools import setup

setup(
    name="graphedit",
    version="0.1.0",
    author="Mitchell Kember",
    description="Interactive editor for small weighted and unweighted graphs",
    license="MIT",
    packages=["graphedit", "graphedit.templates"],
    python_requires=">=3.9",
    install_requires=["Jinja2>=3,<4", "PyYAML>=5.1"],
    extras_require={"test": ["pytest>=7"]},
    package_data={"graphedit.templates": ["*.jinja", "*.txt"],},
    entry_points={"console_scripts": ["graphedit = graphedit.cli:main"]},
)
