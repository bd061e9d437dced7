"""
Drillo - Adaptive Vocabulary Drilling Tool

A small terminal tool for storing word pairs, practising translation
recall, and steering practice toward the words that need it most.
"""

__version__ = "1.0.0"
__author__ = "Drillo Contributors"
