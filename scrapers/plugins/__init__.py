"""Catalog provider plugins, one module per remote source."""
