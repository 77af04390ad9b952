"""Copyright (c) 2025 DFlexy"""
"""https://github.com/DFlexy"""
