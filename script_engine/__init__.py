"""
Script engine: prompt building, completion parsing, timeline derivation,
script synthesis, the picks flow and the hook catalog.
"""
