#!/usr/bin/env python3
"""
Site Element Mapper - Main Entry Point

A tool for crawling websites and mapping the interactive elements on their
pages, ready for end-to-end test generation.
"""

from element_mapper.cli import main


if __name__ == "__main__":
    main()
