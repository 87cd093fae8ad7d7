"""
Command-line support for go-reorder: file discovery, processing and output.
"""
