"""Command-line interface for imagecache."""
