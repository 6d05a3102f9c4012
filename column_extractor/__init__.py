"""Excel column extractor: pull fixed columns out of a sheet and recover list literals."""

__version__ = "0.1.0"
