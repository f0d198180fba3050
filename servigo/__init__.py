"""
ServiGO - find and book local professionals across Tunisia.
"""

__version__ = "0.1.0"
