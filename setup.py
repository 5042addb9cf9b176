from setuptools import setup

def find_version():
    import os
    with open(os.path.join("coordconv", "__init__.py")) as file:
        for line in file:
            if line.startswith("__version__"):
                start = line.index('"')
                end = line[start+1:].index('"')
                return line[start+1:][:end]

long_description = ""

setup(
    name = 'coordconv',
    packages = ['coordconv'],
    version = find_version(),
    install_requires = [],
    extras_require = {
        "test" : ["pytest"],
    },
    python_requires = '>=3.5',
    description = 'Formatting options for converting between geographic coordinate notations',
    long_description = long_description,
    author = 'coordconv developers',
    license = 'Artistic',
    keywords = ["MGRS", "USNG", "UTM", "GARS", "GEOREF"],
    classifiers = [
        "Development Status :: 3 - Alpha",
        "License :: OSI Approved :: Artistic License",
        "Programming Language :: Python :: 3 :: Only",
        "Topic :: Scientific/Engineering :: GIS"
    ]
)
