"""Run two commands as a pipeline between an input file and an output file,
with small character, number, string, buffer, list and output helpers."""

__version__ = "0.1.0"