from setuptools import setup, find_packages

setup(
    name="diff_review",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "pyyaml",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "diffreview=diff_review.cli:main",
        ],
    },
    description="Accept/reject reconciliation of line diffs for reviewing AI-proposed edits.",
)
