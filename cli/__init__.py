"""pho command line."""
