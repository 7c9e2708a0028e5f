from setuptools import setup

# install with: pip install -e .
# tests with:   pip install -e .[test] && pytest

setup(
    name='wordassist',
    version='0.2.0',
    description='narrow down the possible answers of a Wordle puzzle and suggest the next guess',
    packages=['wordassist'],
    python_requires='>=3.8',
    install_requires=[
        'click',
        'rich',
        'urwid',
        'blinker',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    entry_points={
        'console_scripts': [
            'wordassist = wordassist.solverui:cli',
            'wordassist-tui = wordassist.interactive:cli',
        ],
    },
)
