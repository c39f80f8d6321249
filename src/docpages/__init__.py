"""Document page extraction for the upload and indexing pipeline."""
