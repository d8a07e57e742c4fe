"""
Benchmark suite for peekjson parsing speed and memory.

Compares peekjson against the standard library json, orjson and ujson on
documents that stay inside peekjson's grammar.
"""
