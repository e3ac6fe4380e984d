"""
Default data files for techradar
"""
import os

# Path to package data directory
DATA_DIR = os.path.dirname(os.path.abspath(__file__))

# Initial collection loaded when no input file is given
DEFAULT_TECHNOLOGIES = os.path.join(DATA_DIR, 'technologies.json')
