from setuptools import setup, find_packages

setup(
    name="sheetdeck",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"desktop_ui": ["qml/*.qml"]},
    py_modules=["main"],
    install_requires=[
        "requests>=2.31.0",
        "python-dotenv>=1.0.0",
        "python-dateutil>=2.8.2",
        "PySide6>=6.6.0",
    ],
    extras_require={
        "test": ["pytest>=7.4.0"],
    },
    entry_points={
        "gui_scripts": ["sheetdeck=desktop_ui.app:main"],
    },
    python_requires=">=3.10",
)
