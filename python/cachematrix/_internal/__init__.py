"""Private implementation modules for cachematrix."""
