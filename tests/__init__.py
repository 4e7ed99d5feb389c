"""
Only the root tests/ directory has an __init__.py. It makes pytest import every test
module as part of one `tests` package, so modules with the same base name in
different subdirectories do not collide. Subdirectories work as namespace packages.
"""
