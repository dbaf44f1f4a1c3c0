"""Chroma-based audio fingerprinting building blocks: windows, spectra, filters, classifiers, configurations and match segments."""

__version__ = "0.1.0"