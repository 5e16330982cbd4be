"""
Site Mirror - a Python tool that mirrors a website to local disk.

This package crawls a site breadth-first from a seed URL, follows same-site
links, and reproduces the remote path structure as a local directory tree.
"""

__version__ = "1.0.0"
__author__ = "Site Mirror Team"
