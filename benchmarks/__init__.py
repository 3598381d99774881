"""
Benchmark suite for tagjson parsing and encoding performance.

Compares tagjson against established JSON libraries:
- Python standard library json
- orjson (Rust-backed)
- ujson (C-backed)
"""
