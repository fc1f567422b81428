"""I/O layer: Parquet schemas and output path helpers."""
