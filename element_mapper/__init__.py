"""
Site Element Mapper Package

A Python tool for crawling a website's pages, extracting their interactive
elements, and producing the page data end-to-end test generators need.
"""

__version__ = "1.0.0"
__author__ = "Assessment Project"
__description__ = "Interactive element discovery tool for end-to-end test scaffolding"
