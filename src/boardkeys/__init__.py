"""boardkeys — fractional-indexing sort keys for grouped note and kanban boards."""
