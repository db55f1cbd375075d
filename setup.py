"""
Hulk 戦術ボードゲーム ルールエンジンのセットアップスクリプト
"""

from setuptools import setup, find_packages

setup(
    name="hulk-engine",
    version="1.0.0",
    description="Hulk - グリッド型戦術ボードゲームのルールエンジン",
    author="",
    packages=find_packages(include=["src", "src.*"]),
    package_dir={"": "."},
    package_data={"src.engine": ["missions/*.json"]},
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "fastapi>=0.118.0",
        "uvicorn>=0.37.0",
        "pydantic>=2.11.10",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "hypothesis>=6.0.0",
            "httpx>=0.27.0",
        ],
    },
)
