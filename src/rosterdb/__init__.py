"""In-memory roster pipeline: parse, filter, paginate and summarize athletes."""

__version__ = "0.1.0"
