# setup.py
from setuptools import setup, find_packages

install_requires = [
    # --- UI & REACTIVE ---
    # FletXr only publishes pre-releases for some versions:
    # uv pip install FletXr --pre
    "flet>=0.28.3",
    "FletXr>=0.1.4",

    # --- MODELS & CONFIG ---
    "pydantic>=2.0.0",
    "pyyaml>=6.0.0",
    "python-dotenv>=1.0.0",
]

extras_require = {
    # --- TESTS ---
    "test": [
        "pytest",
        "pytest-asyncio>=0.23",
    ],
}

setup(
    name="dugout",
    version="0.3.0",
    description="Dugout - MLB team catalog with favorites",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    package_data={
        "dugout.shared.domain.catalog": ["data/*.yaml"],
        "dugout.shared.config": ["settings/*.yaml"],
    },
    install_requires=install_requires,
    extras_require=extras_require,
    entry_points={
        "console_scripts": [
            "dugout=dugout.app.main:run",
        ],
    },
    python_requires=">=3.11",
)
