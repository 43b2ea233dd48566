"""
Low-level helpers shared by the extraction core.

Nothing here imports from msgextract.core, so any core module can use it.
"""
