"""Application shell for imagecache."""
