from setuptools import find_packages, setup

setup(
  name="curve448ct",
  version="0.1.0",
  description="Constant-time X448 scalar multiplication in plain Python",
  long_description=open("README.md").read(),
  long_description_content_type="text/markdown",
  packages=find_packages(include=["curve448ct", "curve448ct.*"]),
  python_requires=">=3.9",
  classifiers=[
    "Programming Language :: Python :: 3",
    "License :: OSI Approved :: MIT License",
    "Operating System :: OS Independent",
    "Topic :: Security :: Cryptography",
  ],
  install_requires=[
    "colorama>=0.4",
    "cryptography>=35",
    "tqdm>=4.62",
  ],
  extras_require={
    "test": ["pytest", "pytest-sugar", "pytest-mock", "coverage", "mypy", "bandit"],
    "dev": ["tox", "isort", "yapf"],
  },
  entry_points=dict(
    console_scripts=["curve448ct = curve448ct.cli.__main__:main"],
  ),
)
