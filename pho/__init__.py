"""pho — scraper for photo gallery 3 galleries."""

__version__ = "1.2.1"
